from __future__ import annotations

from typing import Iterable, Protocol

from .types import Direction, PlacedTile, PremiumField, Square

MIN_WORD_LENGTH = 4

MULTIPLIERS: dict[PremiumField, int] = {
    PremiumField.DOUBLE_LETTER: 2,
    PremiumField.TRIPLE_LETTER: 3,
    PremiumField.QUADRUPLE_LETTER: 4,
    PremiumField.WORD_MULTIPLIER: 2,
}

ALL_TILES_BONUS = 45  # za použitie všetkých 10 kociek v jednom ťahu

LONG_WORD_BONUSES: dict[int, int] = {
    10: 20,
    11: 25,
    12: 30,
    13: 35,
    14: 40,
    15: 45,
    16: 50,
}

JOKER_END_PENALTY = 10  # nepoužitý joker na konci hry

MINUTE_MS = 60 * 1000
DEFAULT_TIME_LIMIT_MS = 30 * MINUTE_MS
TIME_LIMITS_MS: dict[str, float] = {
    "SHORT": 15 * MINUTE_MS,
    "STANDARD": 30 * MINUTE_MS,
    "LONG": 35 * MINUTE_MS,
    "UNLIMITED": float("inf"),
}
INVALID_WORD_PENALTIES_MS = (1 * MINUTE_MS, 2 * MINUTE_MS, 4 * MINUTE_MS)
CHALLENGE_PENALTY_MS = 3 * MINUTE_MS


class ScoredTile(Protocol):
    value: int
    is_joker: bool


def get_long_word_bonus(length: int) -> int:
    """Bonus za dlhé slovo (10+ písmen), nad 16 písmen ostáva na maxime."""
    if length < 10:
        return 0
    return LONG_WORD_BONUSES[min(length, 16)]


def calculate_end_game_penalty(tiles: Iterable[ScoredTile]) -> int:
    """Odpočet za kocky, ktoré ostali hráčovi na stojane.

    Joker počas hry nemá body, ale na konci sa počíta za JOKER_END_PENALTY.
    """
    return sum(JOKER_END_PENALTY if tile.is_joker else tile.value for tile in tiles)


def get_invalid_word_penalty(attempt_number: int) -> int:
    """Časová penalizácia za neplatné slovo: 1, 2 a potom 4 minúty."""
    idx = max(1, attempt_number) - 1
    return INVALID_WORD_PENALTIES_MS[min(idx, len(INVALID_WORD_PENALTIES_MS) - 1)]


def word_length(squares: Iterable[Square]) -> int:
    """Počet písmen slova v kockách (DŽ, LJ, NJ sú po jednom písmene)."""
    return sum(1 for sq in squares if sq.letter_tile is not None)


def placements_in_line(placed_tiles: list[PlacedTile]) -> Direction | None:
    """Či sú všetky položené kocky v jednom riadku alebo stĺpci."""
    rows = {p.row for p in placed_tiles}
    cols = {p.col for p in placed_tiles}
    if len(rows) == 1:
        return Direction.HORIZONTAL
    if len(cols) == 1:
        return Direction.VERTICAL
    return None
