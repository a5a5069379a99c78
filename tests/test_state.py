from __future__ import annotations

import json

import pytest
from conftest import make_joker, word_tiles

from kvizovka.core.board import Board
from kvizovka.core.game import Game, GameEndReason, GameStatus, PlayerState
from kvizovka.core.state import (
    SCHEMA_VERSION,
    build_save_state_dict,
    parse_save_state_dict,
    restore_bag_from_save,
    restore_board_from_save,
    restore_game_from_save,
    tile_from_dict,
    tile_to_dict,
)
from kvizovka.core.tiles import create_tile_bag
from kvizovka.core.types import PlacedTile
from kvizovka.core.word_validator import WordValidator


def _played_game(dictionary) -> Game:
    rack = word_tiles(["K", "U", "Ć", "A"]) + [make_joker()]
    game = Game(
        board=Board(),
        bag=create_tile_bag(seed=21),
        players=[PlayerState("p1", "Ana", rack), PlayerState("p2", "Boris", word_tiles(["E"]))],
        word_validator=WordValidator(dictionary),
    )
    # A padne na DL (8,12)
    game.make_move([PlacedTile(t, 8, 9 + i) for i, t in enumerate(rack[:4])])
    return game


def test_tile_dict_round_trip() -> None:
    joker = make_joker("Š")
    assert tile_from_dict(dict(tile_to_dict(joker))) == joker


def test_tile_from_dict_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        tile_from_dict({"letter": "A", "value": 1})
    with pytest.raises(ValueError):
        tile_from_dict({"id": "x", "letter": "A", "value": "1"})


def test_save_and_restore_game(dictionary) -> None:
    game = _played_game(dictionary)
    raw = json.loads(json.dumps(build_save_state_dict(game), ensure_ascii=False))
    state = parse_save_state_dict(raw)
    assert state["schema_version"] == SCHEMA_VERSION

    restored = restore_game_from_save(state, dictionary, strict=True)
    assert restored.scores() == game.scores()
    assert restored.current_index == game.current_index
    assert restored.status is GameStatus.IN_PROGRESS
    assert [t.id for t in restored.bag.peek_tiles()] == [t.id for t in game.bag.peek_tiles()]
    assert [t.id for t in restored.players[0].tiles] == [t.id for t in game.players[0].tiles]
    assert restored.board.occupied_positions() == game.board.occupied_positions()
    assert restored.board.is_blocker(8, 8) and restored.board.is_blocker(8, 13)
    assert restored.board.get_square(8, 12).is_used
    assert restored.board.get_tile(8, 10) == game.board.get_tile(8, 10)


def test_restored_game_keeps_end_reason(dictionary) -> None:
    game = _played_game(dictionary)
    game.end_game(GameEndReason.ENDED_BY_PLAYER)
    state = parse_save_state_dict(build_save_state_dict(game))
    restored = restore_game_from_save(state, dictionary)
    assert restored.ended
    assert restored.end_reason is GameEndReason.ENDED_BY_PLAYER
    assert restored.winner == game.winner


def test_restore_bag_and_board_helpers(dictionary) -> None:
    state = parse_save_state_dict(build_save_state_dict(_played_game(dictionary)))
    bag = restore_bag_from_save(state, seed=3)
    assert bag.remaining() == len(state["bag"])
    board = restore_board_from_save(state)
    assert board.get_tile(8, 9).letter == "K"


@pytest.mark.parametrize(
    "patch",
    [
        {"schema_version": "0"},
        {"players": []},
        {"current_index": 5},
        {"status": "PAUSED"},
        {"board": [{"row": 20, "col": 0, "kind": "blocker"}]},
        {"board": [{"row": 1, "col": 1, "kind": "stone"}]},
    ],
)
def test_parse_rejects_bad_state(dictionary, patch) -> None:
    data = dict(build_save_state_dict(_played_game(dictionary)))
    data.update(patch)
    with pytest.raises(ValueError):
        parse_save_state_dict(data)
