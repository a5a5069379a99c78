from __future__ import annotations

import pytest
from conftest import make_joker, make_tile, place_word

from kvizovka.core.board import Board
from kvizovka.core.move_validator import MoveValidator
from kvizovka.core.types import BlockerTile, Direction, PlacedTile
from kvizovka.core.word_validator import WordValidator

KUCA = ["K", "U", "Ć", "A"]


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def validator(board, dictionary) -> MoveValidator:
    return MoveValidator(board, WordValidator(dictionary))


def _put(board: Board, placed: list[PlacedTile]) -> None:
    for p in placed:
        board.set_tile(p.row, p.col, p.tile)


def test_first_move_on_center(validator) -> None:
    result = validator.validate_move(place_word(KUCA, (8, 8)))
    assert result.is_valid
    assert result.reason is None
    assert result.direction is Direction.HORIZONTAL
    assert result.word_texts == ["KUĆA"]


def test_first_move_next_to_center(validator) -> None:
    # (8,9) susedí so stredom
    result = validator.validate_move(place_word(KUCA, (8, 9)))
    assert result.is_valid


def test_first_move_away_from_center(validator) -> None:
    result = validator.validate_move(place_word(KUCA, (0, 0)))
    assert not result.is_valid
    assert result.reason_code == "must_touch_center"


def test_no_tiles(validator) -> None:
    result = validator.validate_move([])
    assert result.reason_code == "no_tiles"
    assert result.reason == "No tiles placed"


def test_out_of_bounds(validator) -> None:
    result = validator.validate_move(place_word(KUCA, (8, 15)))
    assert result.reason_code == "out_of_bounds"


def test_occupied_square(board, validator) -> None:
    board.set_tile(8, 8, make_tile("S"))
    result = validator.validate_move(place_word(KUCA, (8, 8)))
    assert result.reason_code == "square_occupied"


def test_duplicate_position(validator) -> None:
    placed = [PlacedTile(make_tile("A"), 8, 8), PlacedTile(make_tile("B"), 8, 8)]
    assert validator.validate_move(placed).reason_code == "duplicate_position"


def test_not_in_one_line(validator) -> None:
    placed = [PlacedTile(make_tile("A"), 8, 8), PlacedTile(make_tile("B"), 9, 9)]
    result = validator.validate_move(placed)
    assert result.reason_code == "not_in_one_line"


def test_gap_in_line(validator) -> None:
    placed = [PlacedTile(make_tile(ch), 8, c) for ch, c in zip(KUCA, (8, 9, 11, 12))]
    assert validator.validate_move(placed).reason_code == "not_in_one_line"


def test_gap_filled_by_existing_letter(board, validator) -> None:
    board.set_tile(8, 10, make_tile("Ć"))
    placed = [PlacedTile(make_tile(ch), 8, c) for ch, c in zip("KUA", (8, 9, 11))]
    result = validator.validate_move(placed)
    assert result.is_valid
    assert result.word_texts == ["KUĆA"]


def test_blocker_in_gap_breaks_line(board, validator) -> None:
    board.set_tile(7, 1, BlockerTile(id="b"))
    placed = [PlacedTile(make_tile("A"), 7, 0), PlacedTile(make_tile("B"), 7, 2)]
    assert validator.validate_move(placed).reason_code == "not_in_one_line"


def test_not_connected(board, validator) -> None:
    _put(board, place_word(KUCA, (8, 8)))
    result = validator.validate_move(place_word(["M", "A", "M", "A"], (0, 0)))
    assert result.reason_code == "not_connected"


def test_board_unchanged_after_validation(board, validator) -> None:
    _put(board, place_word(KUCA, (8, 8)))
    before = board.occupied_positions()
    validator.validate_move(place_word(["K", "U", "Ć", "E"], (9, 8)))
    validator.validate_move(place_word(["X", "Y", "Z", "W"], (12, 0)))
    assert board.occupied_positions() == before


def test_invalid_word(validator) -> None:
    result = validator.validate_move(place_word(["K", "U", "Ć", "O"], (8, 8)))
    assert not result.is_valid
    assert result.reason_code == "invalid_words"
    assert "KUĆO" in result.reason
    assert result.reason.startswith("Invalid words: ")
    assert [r.word for r in result.invalid_words] == ["KUĆO"]
    assert result.word_texts == ["KUĆO"]


def test_unknown_word_accepted_without_dictionary_check(board, dictionary) -> None:
    lenient = MoveValidator(board, WordValidator(dictionary), check_dictionary=False)
    assert lenient.validate_move(place_word(["K", "U", "Ć", "O"], (8, 8))).is_valid


def test_word_too_short(validator) -> None:
    result = validator.validate_move(place_word(["M", "A"], (8, 8)))
    assert not result.is_valid
    assert result.reason_code == "word_too_short"
    assert result.reason == "All words must be at least 4 letters long"


def test_vertical_move_through_existing_letter(board, validator) -> None:
    _put(board, place_word(KUCA, (8, 8)))
    placed = [PlacedTile(make_tile(ch), r, 11) for ch, r in zip("MMA", (7, 9, 10))]
    result = validator.validate_move(placed)
    assert result.is_valid
    assert result.direction is Direction.VERTICAL
    assert result.word_texts == ["MAMA"]


def test_cross_words_are_found(board, validator) -> None:
    # krížové dvojice (TM, AA) majú len 2 písmená, slovom nie sú
    _put(board, place_word(["T", "A", "T", "A"], (8, 8)))
    placed = place_word(["M", "A", "M", "A"], (9, 8))
    result = validator.validate_move(placed)
    assert result.is_valid
    assert result.word_texts == ["MAMA"]


def test_cross_word_of_min_length_is_validated(board, validator) -> None:
    # stĺpec 8: S E L, nové ONAJ na riadku 11 dopĺňa krížové SELO
    _put(board, place_word(["S", "E", "L"], (8, 8), horizontal=False))
    placed = place_word(["O", "N", "A", "J"], (11, 8))
    result = validator.validate_move(placed)
    assert result.is_valid
    assert sorted(result.word_texts) == ["ONAJ", "SELO"]


def test_single_tile_extends_word_horizontally(board, validator) -> None:
    _put(board, place_word(["K", "U", "Ć"], (8, 8)))
    result = validator.validate_move([PlacedTile(make_tile("A"), 8, 11)])
    assert result.is_valid
    assert result.direction is Direction.HORIZONTAL


def test_single_tile_vertical_neighbour(board, validator) -> None:
    _put(board, place_word(["U", "Ć", "A"], (9, 8), horizontal=False))
    result = validator.validate_move([PlacedTile(make_tile("K"), 8, 8)])
    assert result.is_valid
    assert result.direction is Direction.VERTICAL
    assert result.word_texts == ["KUĆA"]


def test_joker_forms_word(validator) -> None:
    placed = place_word(["K", "U", "Ć"], (8, 8)) + [PlacedTile(make_joker("A"), 8, 11)]
    result = validator.validate_move(placed)
    assert result.is_valid
    assert result.word_texts == ["KUĆA"]


def test_digraph_counts_as_one_letter(validator) -> None:
    # LJUBAV = 5 kociek (LJ je jedna kocka)
    placed = place_word(["LJ", "U", "B", "A", "V"], (8, 8))
    result = validator.validate_move(placed)
    assert result.is_valid
    assert result.word_texts == ["LJUBAV"]


def test_words_formed_are_snapshots(board, validator) -> None:
    result = validator.validate_move(place_word(KUCA, (8, 8)))
    square = result.words_formed[0][0]
    assert square.letter_tile is not None
    assert board.get_square(8, 8).tile is None


def test_same_tile_on_two_squares(validator) -> None:
    m, a = make_tile("M"), make_tile("A")
    placed = [PlacedTile(m, 8, 8), PlacedTile(a, 8, 9), PlacedTile(m, 8, 10), PlacedTile(a, 8, 11)]
    result = validator.validate_move(placed)
    assert not result.is_valid
    assert result.reason_code == "duplicate_tile"
