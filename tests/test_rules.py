from __future__ import annotations

from conftest import make_joker, make_tile

from kvizovka.core.rules import (
    CHALLENGE_PENALTY_MS,
    MINUTE_MS,
    calculate_end_game_penalty,
    get_invalid_word_penalty,
    get_long_word_bonus,
    placements_in_line,
    word_length,
)
from kvizovka.core.types import BlockerTile, Direction, PlacedTile, Square


def test_line_detection() -> None:
    row = [PlacedTile(make_tile("A"), 7, c) for c in (7, 8, 9)]
    col = [PlacedTile(make_tile("A"), r, 3) for r in (1, 2)]
    diag = [PlacedTile(make_tile("A"), 1, 1), PlacedTile(make_tile("A"), 2, 2)]
    assert placements_in_line(row) is Direction.HORIZONTAL
    assert placements_in_line(col) is Direction.VERTICAL
    assert placements_in_line(diag) is None


def test_long_word_bonus_table() -> None:
    assert get_long_word_bonus(9) == 0
    assert get_long_word_bonus(10) == 20
    assert get_long_word_bonus(13) == 35
    assert get_long_word_bonus(16) == 50
    assert get_long_word_bonus(17) == 50


def test_end_game_penalty_counts_jokers_as_ten() -> None:
    tiles = [make_tile("A"), make_tile("K"), make_joker()]
    assert calculate_end_game_penalty(tiles) == 1 + 2 + 10
    assert calculate_end_game_penalty([]) == 0


def test_time_penalties() -> None:
    assert get_invalid_word_penalty(1) == MINUTE_MS
    assert get_invalid_word_penalty(2) == 2 * MINUTE_MS
    assert get_invalid_word_penalty(3) == 4 * MINUTE_MS
    assert get_invalid_word_penalty(7) == 4 * MINUTE_MS
    assert CHALLENGE_PENALTY_MS == 180_000


def test_word_length_counts_tiles() -> None:
    squares = [Square(row=0, col=i, tile=make_tile(ch)) for i, ch in enumerate(["LJ", "U", "B", "A", "V"])]
    squares.append(Square(row=0, col=5, tile=BlockerTile(id="b")))
    assert word_length(squares) == 5
