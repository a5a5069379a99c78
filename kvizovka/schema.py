"""Pydantic schéma pre externý zápis ťahu (JSON z CLI alebo UI).

Model je tolerantný k zápisu písmen (malé/veľké, `?` alebo `JOKER` pre
jokera) a vytvorí z neho kanonické `PlacedTile` pre jadro.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .core.distribution import JOKER, get_tile_value, is_alphabet_letter
from .core.layout import BOARD_SIZE
from .core.types import PlacedTile, Tile

JOKER_MARKS = {"?", JOKER, "BLANK", "ŽOLJA"}


class PlacementModel(BaseModel):
    """Jedna kocka položená v ťahu."""

    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)
    letter: str
    joker_letter: str | None = None

    @field_validator("letter")
    @classmethod
    def _norm_letter(cls, v: str) -> str:
        s = str(v).strip().upper()
        if s in JOKER_MARKS:
            return "?"
        if not is_alphabet_letter(s):
            raise ValueError(f"unknown_letter:{s}")
        return s

    @field_validator("joker_letter")
    @classmethod
    def _norm_joker_letter(cls, v: str | None) -> str | None:
        if v is None or not str(v).strip():
            return None
        s = str(v).strip().upper()
        if not is_alphabet_letter(s):
            raise ValueError(f"unknown_letter:{s}")
        return s

    @model_validator(mode="after")
    def _joker_consistency(self) -> "PlacementModel":
        if self.letter == "?" and self.joker_letter is None:
            raise ValueError("joker_requires_letter")
        if self.letter != "?" and self.joker_letter is not None:
            raise ValueError("joker_letter_only_for_joker")
        return self

    @property
    def is_joker(self) -> bool:
        return self.letter == "?"

    def to_tile(self, tile_id: str) -> Tile:
        if self.is_joker:
            return Tile(id=tile_id, letter="", value=0, is_joker=True, joker_letter=self.joker_letter)
        return Tile(id=tile_id, letter=self.letter, value=get_tile_value(self.letter))


class MoveModel(BaseModel):
    """Návrh ťahu: zoznam kociek s cieľovými poliami."""

    placements: list[PlacementModel] = Field(..., min_length=1)

    def to_placed_tiles(self, id_prefix: str = "move") -> list[PlacedTile]:
        return [
            PlacedTile(tile=p.to_tile(f"{id_prefix}-{idx}"), row=p.row, col=p.col)
            for idx, p in enumerate(self.placements)
        ]


def parse_move_payload(data: Any) -> MoveModel:
    """Validuje payload; pri chybe vyhodí `pydantic.ValidationError`."""
    return MoveModel.model_validate(data)
