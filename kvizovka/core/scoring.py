from __future__ import annotations

from typing import Iterable, Sequence

from .rules import (
    ALL_TILES_BONUS,
    MULTIPLIERS,
    ScoredTile,
    calculate_end_game_penalty,
    get_long_word_bonus,
)
from .types import PlacedTile, PremiumField, ScoreBreakdown, Square, WordScore

RACK_SIZE_FOR_BONUS = 10

_LETTER_FIELDS = (
    PremiumField.DOUBLE_LETTER,
    PremiumField.TRIPLE_LETTER,
    PremiumField.QUADRUPLE_LETTER,
)


class ScoreCalculator:
    """Výpočet skóre slov a ťahov; nič nemení na doske ani na poliach.

    Prémie platia len pre kocky položené v tomto ťahu na nepoužité pole.
    Slovné násobky sa pri viacerých poliach v jednom slove násobia (2 × 2 = 4).
    """

    def calculate_word_score(
        self,
        word_squares: Sequence[Square],
        newly_placed_tiles: Iterable[PlacedTile],
    ) -> WordScore:
        new_cells = {p.position for p in newly_placed_tiles}
        base = 0
        letter_bonus = 0
        word_multiplier = 1
        letters: list[str] = []

        for square in word_squares:
            tile = square.letter_tile
            if tile is None:
                continue  # blokátor alebo prázdne pole
            letters.append(tile.text)
            value = tile.value
            premium = square.premium_field
            if (square.row, square.col) in new_cells and premium and not square.is_used:
                if premium in _LETTER_FIELDS:
                    boosted = value * MULTIPLIERS[premium]
                    letter_bonus += boosted - value
                    base += boosted
                    continue
                if premium == PremiumField.WORD_MULTIPLIER:
                    word_multiplier *= MULTIPLIERS[premium]
                # CENTER je obyčajné pole
            base += value

        return WordScore(
            word="".join(letters),
            base_score=base,
            letter_bonus=letter_bonus,
            word_multiplier=word_multiplier,
            final_score=base * word_multiplier,
            length=len(letters),
        )

    def calculate_move_score(
        self,
        all_words: Sequence[Sequence[Square]],
        newly_placed_tiles: Sequence[PlacedTile],
        tiles_used_count: int,
    ) -> ScoreBreakdown:
        """Súčet slov + bonus za celý stojan + najvyšší bonus za dlhé slovo."""
        word_scores = tuple(self.calculate_word_score(w, newly_placed_tiles) for w in all_words)
        total = sum(ws.final_score for ws in word_scores)

        all_tiles_bonus = ALL_TILES_BONUS if tiles_used_count == RACK_SIZE_FOR_BONUS else 0
        # len jeden (najvyšší) bonus za dlhé slovo; dĺžka textu, LJ sú dva znaky
        long_word_bonus = max((get_long_word_bonus(len(ws.word)) for ws in word_scores), default=0)

        return ScoreBreakdown(
            total_score=total + all_tiles_bonus + long_word_bonus,
            word_scores=word_scores,
            all_tiles_bonus=all_tiles_bonus,
            long_word_bonus=long_word_bonus,
        )

    def calculate_final_score(self, player_score: int, remaining_tiles: Iterable[ScoredTile]) -> int:
        """Skóre po odpočte kociek, ktoré ostali na stojane (joker = -10)."""
        return player_score - calculate_end_game_penalty(remaining_tiles)

    def get_score_preview(
        self,
        word_squares: Sequence[Square],
        newly_placed_tiles: Iterable[PlacedTile],
    ) -> int:
        """Skóre jedného slova bez bonusov (AI, náhľad v UI)."""
        return self.calculate_word_score(word_squares, newly_placed_tiles).final_score


def get_highest_scoring_option(options: Sequence[object]) -> int:
    """Index možnosti s najvyšším `score` (pri zhode prvá), -1 pre prázdny zoznam."""
    best = -1
    best_score: float = float("-inf")
    for idx, option in enumerate(options):
        score = option["score"] if isinstance(option, dict) else getattr(option, "score")
        if score > best_score:
            best, best_score = idx, score
    return best
