from __future__ import annotations

import pytest
from pydantic import ValidationError

from kvizovka.schema import MoveModel, parse_move_payload


def test_parse_move_normalizes_letters() -> None:
    move = parse_move_payload(
        {
            "placements": [
                {"row": 8, "col": 8, "letter": "lj"},
                {"row": 8, "col": 9, "letter": "u"},
                {"row": 8, "col": 10, "letter": "?", "joker_letter": "b"},
            ]
        }
    )
    assert [p.letter for p in move.placements] == ["LJ", "U", "?"]
    placed = move.to_placed_tiles("cli")
    assert [p.tile.id for p in placed] == ["cli-0", "cli-1", "cli-2"]
    assert placed[0].tile.value == 4
    assert placed[2].tile.is_joker and placed[2].tile.text == "B"
    assert placed[2].tile.value == 0


def test_joker_aliases() -> None:
    move = MoveModel.model_validate(
        {"placements": [{"row": 0, "col": 0, "letter": "joker", "joker_letter": "Ž"}]}
    )
    assert move.placements[0].is_joker


@pytest.mark.parametrize(
    "placement",
    [
        {"row": 17, "col": 0, "letter": "A"},
        {"row": 0, "col": -1, "letter": "A"},
        {"row": 0, "col": 0, "letter": "Q"},
        {"row": 0, "col": 0, "letter": "?"},
        {"row": 0, "col": 0, "letter": "A", "joker_letter": "B"},
        {"row": 0, "col": 0, "letter": "?", "joker_letter": "W"},
    ],
)
def test_invalid_placements(placement) -> None:
    with pytest.raises(ValidationError):
        parse_move_payload({"placements": [placement]})


def test_empty_move_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_move_payload({"placements": []})
