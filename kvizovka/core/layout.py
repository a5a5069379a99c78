"""Statická konfigurácia dosky Kvízovky (17×17).

Súradnice: riadok 0 = hore, stĺpec 0 = vľavo, stred je (8, 8).
Rozloženie prémií sa načíta raz z `assets/premiums.json` a ďalej sa nemení.
"""
from __future__ import annotations

import logging
from collections import Counter
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from .assets import get_premiums_path, read_json_asset
from .types import PremiumField

log = logging.getLogger("kvizovka.layout")

BOARD_SIZE = 17
BOARD_CENTER = (8, 8)

_TAGS: dict[str, PremiumField] = {
    "DL": PremiumField.DOUBLE_LETTER,
    "TL": PremiumField.TRIPLE_LETTER,
    "QL": PremiumField.QUADRUPLE_LETTER,
    "WM": PremiumField.WORD_MULTIPLIER,
    "C": PremiumField.CENTER,
}


def _load_premiums(path: str) -> dict[tuple[int, int], PremiumField]:
    data = read_json_asset(path)
    if len(data) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in data):
        raise ValueError(f"Rozloženie {path} nemá rozmer {BOARD_SIZE}x{BOARD_SIZE}")
    premiums: dict[tuple[int, int], PremiumField] = {}
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            tag = str(data[r][c]).strip().upper()
            if not tag:
                continue
            kind = _TAGS.get(tag)
            if kind is None:
                raise ValueError(f"Neznáma prémia '{tag}' na ({r},{c}) v {path}")
            premiums[(r, c)] = kind
    log.debug("premium_layout_loaded path=%s fields=%s", path, len(premiums))
    return premiums


@lru_cache(maxsize=1)
def premium_fields() -> Mapping[tuple[int, int], PremiumField]:
    """Nemenná mapa (row, col) -> prémia; načíta sa iba raz."""
    return MappingProxyType(_load_premiums(get_premiums_path()))


def get_premium_field(row: int, col: int) -> PremiumField | None:
    return premium_fields().get((row, col))


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def get_adjacent_positions(row: int, col: int) -> list[tuple[int, int]]:
    """Ortogonálni susedia (hore, dole, vľavo, vpravo), len v rámci dosky."""
    candidates = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]
    return [(r, c) for r, c in candidates if is_valid_position(r, c)]


def premium_field_counts() -> dict[PremiumField, int]:
    return dict(Counter(premium_fields().values()))
