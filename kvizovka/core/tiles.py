from __future__ import annotations

import logging
import random

from .distribution import JOKER, SERBIAN, VariantDefinition
from .types import Tile

log = logging.getLogger("kvizovka.tiles")


class TileBag:
    """Taška s kockami, z ktorej hráči ťahajú.

    Pozn.: Taška sa pri vrátení kociek sama nemieša. Výmena je viackrokový
    úkon a poradie riadi volajúci (`return_tiles` -> `shuffle` -> `draw`).
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        tiles: list[Tile] | None = None,
        variant: VariantDefinition = SERBIAN,
    ) -> None:
        self.variant = variant
        self.seed = seed
        self._rng = random.Random(seed)
        # Ak sú poskytnuté `tiles`, zachovaj ich presne v danom poradí (load hry).
        self._tiles: list[Tile] = list(tiles) if tiles else []

    def initialize(self) -> None:
        """Naplní tašku podľa distribúcie (bez miešania)."""
        self._tiles = []
        tile_id = 0
        for entry in self.variant.letters:
            for i in range(entry.count):
                if entry.letter == JOKER:
                    self._tiles.append(Tile(id=f"joker-{i}", letter="", value=0, is_joker=True))
                else:
                    self._tiles.append(Tile(id=f"tile-{tile_id}", letter=entry.letter, value=entry.points))
                    tile_id += 1

        if len(self._tiles) != self.variant.expected_total:
            log.warning(
                "tile_count_mismatch expected=%s got=%s",
                self.variant.expected_total,
                len(self._tiles),
            )

    def reset(self) -> None:
        self.initialize()

    def shuffle(self) -> None:
        """Fisher-Yates: každé poradie tašky je rovnako pravdepodobné."""
        tiles = self._tiles
        for i in range(len(tiles) - 1, 0, -1):
            j = self._rng.randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]

    def draw(self, count: int) -> list[Tile]:
        """Potiahne `count` kociek (alebo menej, ak taška nestačí)."""
        actual = min(max(count, 0), len(self._tiles))
        if actual == 0:
            return []
        drawn = self._tiles[-actual:]
        del self._tiles[-actual:]
        return drawn

    def draw_one(self) -> Tile | None:
        if not self._tiles:
            return None
        return self._tiles.pop()

    def return_tiles(self, tiles: list[Tile]) -> None:
        """Vráti kocky do tašky (volajúci má následne zavolať `shuffle`)."""
        self._tiles.extend(tiles)

    def remaining(self) -> int:
        return len(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    def peek_tiles(self) -> list[Tile]:
        """Kópia obsahu tašky; zmena zoznamu neovplyvní tašku."""
        return list(self._tiles)

    def get_distribution(self) -> dict[str, int]:
        distribution: dict[str, int] = {}
        for tile in self._tiles:
            key = JOKER if tile.is_joker else tile.letter
            distribution[key] = distribution.get(key, 0) + 1
        return distribution

    def count_letter(self, letter: str) -> int:
        wanted = letter.upper()
        if wanted == JOKER:
            return sum(1 for tile in self._tiles if tile.is_joker)
        return sum(1 for tile in self._tiles if not tile.is_joker and tile.letter == wanted)

    def get_random_tile(self) -> Tile | None:
        """Náhodná kocka z tašky bez vybratia."""
        if not self._tiles:
            return None
        return self._rng.choice(self._tiles)


def create_tile_bag(seed: int | None = None, variant: VariantDefinition = SERBIAN) -> TileBag:
    """Nová naplnená a premiešaná taška."""
    bag = TileBag(seed=seed, variant=variant)
    bag.initialize()
    bag.shuffle()
    return bag
