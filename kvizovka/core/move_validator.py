"""Rozhodca jedného ťahu.

Kontroly idú v pevnom poradí a končia pri prvom porušení:

1. aspoň jedna kocka,
2. všetky cieľové polia sú na doske, voľné a žiadna kocka nie je použitá dvakrát,
3. kocky tvoria jednu líniu bez prázdnych dier,
4. prvý ťah sa dotýka stredu, ďalšie nadväzujú na položené písmená,
5. dočasné položenie kociek a nájdenie všetkých slov (doska sa potom vráti),
6. všetky slová s aspoň MIN_WORD_LENGTH písmenami sú v slovníku,
7. aspoň jedno slovo má minimálnu dĺžku.

Porušenie pravidla nie je výnimka; vracia sa `MoveValidationResult`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .board import Board
from .rules import MIN_WORD_LENGTH, placements_in_line
from .types import Direction, PlacedTile, Square, WordValidationResult
from .word_validator import WordValidator

log = logging.getLogger("kvizovka.moves")

WordSquares = tuple[Square, ...]


@dataclass(frozen=True)
class MoveValidationResult:
    """Výsledok validácie ťahu.

    - reason: čitateľný dôvod neplatnosti (None pri úspechu)
    - reason_code: stabilný kód dôvodu (napr. `not_in_one_line`)
    - words_formed: kópie polí každého vytvoreného slova, hlavné slovo prvé
    """

    is_valid: bool
    reason: str | None = None
    reason_code: str | None = None
    words_formed: tuple[WordSquares, ...] = ()
    direction: Direction | None = None
    invalid_words: tuple[WordValidationResult, ...] = field(default_factory=tuple)

    @property
    def word_texts(self) -> list[str]:
        return [WordValidator.extract_word_from_squares(word) for word in self.words_formed]


def _reject(code: str, reason: str, **kwargs: object) -> MoveValidationResult:
    log.debug("move_rejected code=%s reason=%s", code, reason)
    return MoveValidationResult(False, reason=reason, reason_code=code, **kwargs)  # type: ignore[arg-type]


class MoveValidator:
    """Overí navrhovaný ťah nad doskou; dosku nikdy trvalo nezmení."""

    def __init__(
        self,
        board: Board,
        word_validator: WordValidator,
        *,
        check_dictionary: bool = True,
    ) -> None:
        self.board = board
        self.word_validator = word_validator
        self.check_dictionary = check_dictionary

    def validate_move(self, placed_tiles: list[PlacedTile]) -> MoveValidationResult:
        # 1) aspoň jedna kocka
        if not placed_tiles:
            return _reject("no_tiles", "No tiles placed")

        # 2) pozície na doske, voľné a bez duplicít (polí aj kociek)
        seen: set[tuple[int, int]] = set()
        seen_ids: set[str] = set()
        for p in placed_tiles:
            if self.board.get_square(p.row, p.col) is None:
                return _reject("out_of_bounds", f"Invalid position: ({p.row}, {p.col})")
            if not self.board.is_empty(p.row, p.col):
                return _reject("square_occupied", f"Square ({p.row}, {p.col}) is occupied")
            if p.position in seen:
                return _reject("duplicate_position", f"Two tiles placed on ({p.row}, {p.col})")
            seen.add(p.position)
            if p.tile.id in seen_ids:
                return _reject("duplicate_tile", f"Tile {p.tile.id} placed more than once")
            seen_ids.add(p.tile.id)

        # 3) jedna línia
        direction = self.determine_direction(placed_tiles)
        if direction is None:
            return _reject("not_in_one_line", "Tiles must form a single horizontal or vertical line")

        # 4) stred pri prvom ťahu, inak spojenie s existujúcimi písmenami
        if self.board.is_empty_board():
            if not any(self.board.touches_center(p.row, p.col) for p in placed_tiles):
                return _reject("must_touch_center", "First move must touch the center square")
        elif not self.board.are_connected(placed_tiles):
            return _reject("not_connected", "Move must connect to existing tiles on the board")

        # 5) dočasne polož kocky a nájdi slová
        for p in placed_tiles:
            self.board.set_tile(p.row, p.col, p.tile)
        try:
            words = self.find_all_words_formed(placed_tiles, direction)
        finally:
            for p in placed_tiles:
                self.board.remove_tile(p.row, p.col)

        # 6) slovníková kontrola
        if self.check_dictionary:
            invalid = self.word_validator.get_invalid_words(words)
            if invalid:
                listing = ", ".join(f"{r.word} ({r.reason})" for r in invalid)
                return _reject(
                    "invalid_words",
                    f"Invalid words: {listing}",
                    words_formed=tuple(words),
                    direction=direction,
                    invalid_words=tuple(invalid),
                )

        # 7) aspoň jedno slovo minimálnej dĺžky
        if not words:
            return _reject(
                "word_too_short",
                f"All words must be at least {MIN_WORD_LENGTH} letters long",
                direction=direction,
            )

        log.debug(
            "move_valid direction=%s words=%s",
            direction.name,
            [WordValidator.extract_word_from_squares(w) for w in words],
        )
        return MoveValidationResult(True, words_formed=tuple(words), direction=direction)

    def determine_direction(self, placed_tiles: list[PlacedTile]) -> Direction | None:
        """Smer ťahu, alebo None, ak kocky netvoria súvislú líniu."""
        if len(placed_tiles) == 1:
            return self._single_tile_direction(placed_tiles[0])

        direction = placements_in_line(placed_tiles)
        if direction is None:
            return None
        if direction is Direction.HORIZONTAL:
            fixed = placed_tiles[0].row
            positions = sorted(p.col for p in placed_tiles)
        else:
            fixed = placed_tiles[0].col
            positions = sorted(p.row for p in placed_tiles)
        if not self._gaps_filled(fixed, positions, direction):
            return None
        return direction

    def _single_tile_direction(self, placed: PlacedTile) -> Direction:
        """Jedna kocka: smer podľa susedných písmen, pri nejednoznačnosti vodorovne."""
        r, c = placed.row, placed.col
        horizontal = self.board.has_letter(r, c - 1) or self.board.has_letter(r, c + 1)
        vertical = self.board.has_letter(r - 1, c) or self.board.has_letter(r + 1, c)
        if vertical and not horizontal:
            return Direction.VERTICAL
        return Direction.HORIZONTAL

    def _gaps_filled(self, fixed: int, positions: list[int], direction: Direction) -> bool:
        """Medzi novými kockami smú byť len už položené písmená (nie blokátor)."""
        for current, nxt in zip(positions, positions[1:]):
            for pos in range(current + 1, nxt):
                r, c = (fixed, pos) if direction is Direction.HORIZONTAL else (pos, fixed)
                if not self.board.has_letter(r, c):
                    return False
        return True

    def find_all_words_formed(self, placed_tiles: list[PlacedTile], direction: Direction) -> list[WordSquares]:
        """Hlavné slovo + krížové slová (predpoklad: kocky sú už dočasne na doske).

        Kratšie úlomky ako MIN_WORD_LENGTH sa nepočítajú ako slová.
        """
        found: dict[tuple[int, int, Direction], WordSquares] = {}

        def _add(squares: list[Square], line: Direction) -> None:
            if len(squares) < MIN_WORD_LENGTH:
                return
            key = (squares[0].row, squares[0].col, line)
            if key not in found:
                found[key] = tuple(sq.snapshot() for sq in squares)

        first = placed_tiles[0]
        _add(self.board.get_tiles_in_line(first.row, first.col, direction), direction)

        cross = direction.perpendicular
        for p in placed_tiles:
            _add(self.board.get_tiles_in_line(p.row, p.col, cross), cross)

        return list(found.values())
