from __future__ import annotations

import logging
from typing import Sequence

from .dictionary import Dictionary, normalize_word
from .rules import MIN_WORD_LENGTH, word_length
from .types import Square, WordValidationResult

log = logging.getLogger("kvizovka.words")

WordSquares = Sequence[Square]


class WordValidator:
    """Tenký adaptér nad slovníkom: najprv dĺžka, potom existencia a druh slova."""

    def __init__(self, dictionary: Dictionary, *, min_length: int = MIN_WORD_LENGTH) -> None:
        self.dictionary = dictionary
        self.min_length = min_length

    def validate_word(self, word: str, length: int | None = None) -> WordValidationResult:
        """Overí slovo; `length` je počet kociek (dvojznak = jedna kocka).

        Bez `length` sa použije dĺžka reťazca.
        """
        w = normalize_word(word)
        n = len(w) if length is None else length
        if n < self.min_length:
            return WordValidationResult(
                False, w, reason=f"Word too short (minimum {self.min_length} letters)"
            )
        if not self.dictionary.exists(w):
            return WordValidationResult(False, w, reason="Word not found in dictionary")
        return WordValidationResult(True, w, category=self.dictionary.category_of(w))

    @staticmethod
    def extract_word_from_squares(squares: WordSquares) -> str:
        """Text slova z polí; joker dáva zvolené písmeno, blokátor a prázdne pole nič."""
        return "".join(sq.letter_tile.text for sq in squares if sq.letter_tile is not None)

    def validate_squares(self, squares: WordSquares) -> WordValidationResult:
        return self.validate_word(self.extract_word_from_squares(squares), word_length(squares))

    def validate_all_words(self, words: Sequence[WordSquares]) -> list[WordValidationResult]:
        results: list[WordValidationResult] = []
        for squares in words:
            if not self.extract_word_from_squares(squares):
                continue
            results.append(self.validate_squares(squares))
        return results

    def are_all_words_valid(self, words: Sequence[WordSquares]) -> bool:
        return all(result.is_valid for result in self.validate_all_words(words))

    def get_invalid_words(self, words: Sequence[WordSquares]) -> list[WordValidationResult]:
        invalid = [result for result in self.validate_all_words(words) if not result.is_valid]
        if invalid:
            log.debug("invalid_words words=%s", [r.word for r in invalid])
        return invalid
