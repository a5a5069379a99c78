"""Pytest konfigurácia a zdieľané fixtures.

- načítanie .env (ak existuje)
- malý slovník v pamäti
- továrne na kocky a položené kocky
"""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Callable

import pytest
from dotenv import load_dotenv

from kvizovka.core.dictionary import WordList
from kvizovka.core.distribution import get_tile_value
from kvizovka.core.types import PlacedTile, Tile, WordCategory


def pytest_configure(config):
    """Načíta premenné prostredia z .env v koreni projektu."""
    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)


WORDS: dict[str, WordCategory] = {
    "KUĆA": WordCategory.NOUN,
    "KUĆE": WordCategory.NOUN,
    "MAMA": WordCategory.NOUN,
    "TATA": WordCategory.NOUN,
    "SELO": WordCategory.NOUN,
    "LJUBAV": WordCategory.NOUN,
    "RADITI": WordCategory.VERB,
    "PISATI": WordCategory.VERB,
    "DOBAR": WordCategory.ADJECTIVE,
    "ONAJ": WordCategory.PRONOUN,
    "DESET": WordCategory.NUMBER,
}


@pytest.fixture
def dictionary() -> WordList:
    return WordList(WORDS)


_ids = itertools.count()


def make_tile(letter: str, tile_id: str | None = None) -> Tile:
    """Kocka s hodnotou podľa srbskej distribúcie; '?' = joker."""
    tid = tile_id or f"t{next(_ids)}"
    if letter == "?":
        return Tile(id=tid, letter="", value=0, is_joker=True)
    return Tile(id=tid, letter=letter, value=get_tile_value(letter))


def make_joker(letter: str | None = None, tile_id: str | None = None) -> Tile:
    tile = make_tile("?", tile_id)
    return tile.with_joker_letter(letter) if letter else tile


def word_tiles(letters: list[str]) -> list[Tile]:
    return [make_tile(ch) for ch in letters]


def place_word(
    letters: list[str], start: tuple[int, int], horizontal: bool = True
) -> list[PlacedTile]:
    """Položené kocky pre slovo od `start`; dvojznaky ako jeden prvok zoznamu."""
    r, c = start
    out: list[PlacedTile] = []
    for i, ch in enumerate(letters):
        rr, cc = (r, c + i) if horizontal else (r + i, c)
        out.append(PlacedTile(tile=make_tile(ch), row=rr, col=cc))
    return out


@pytest.fixture
def tile_factory() -> Callable[[str], Tile]:
    return make_tile


@pytest.fixture
def placed_word() -> Callable[..., list[PlacedTile]]:
    return place_word
