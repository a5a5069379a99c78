"""Distribúcia kociek pre srbskú (latinka) Kvízovku.

Tabuľka písmen je zabudovaná v kóde ako jediný variant; dvojznaky
(DŽ, LJ, NJ) sú samostatné kocky.
"""
from __future__ import annotations

from dataclasses import dataclass

JOKER = "JOKER"
TILES_PER_PLAYER = 10
EXPECTED_TOTAL_TILES = 238


@dataclass(frozen=True)
class VariantLetter:
    """Jedna dlaždica (písmeno alebo joker) vo variante."""

    letter: str
    count: int
    points: int


@dataclass(frozen=True)
class VariantDefinition:
    """Definícia variantu vrátane distribúcie a bodov."""

    slug: str
    language: str
    letters: tuple[VariantLetter, ...]
    expected_total: int = EXPECTED_TOTAL_TILES

    @property
    def distribution(self) -> dict[str, int]:
        return {letter.letter: letter.count for letter in self.letters}

    @property
    def tile_points(self) -> dict[str, int]:
        return {letter.letter: letter.points for letter in self.letters}

    @property
    def total_tiles(self) -> int:
        return sum(letter.count for letter in self.letters)

    @property
    def joker_count(self) -> int:
        return self.distribution.get(JOKER, 0)


def _letters(rows: list[tuple[str, int, int]]) -> tuple[VariantLetter, ...]:
    return tuple(VariantLetter(letter=ch, count=count, points=points) for ch, count, points in rows)


# --- Zabudovaný variant (srbčina, latinka) -------------------------------

SERBIAN = VariantDefinition(
    slug="serbian",
    language="Serbian (Latin)",
    letters=_letters(
        [
            # 1 bod: samohlásky a najčastejšie spoluhlásky
            ("A", 20, 1),
            ("E", 17, 1),
            ("I", 16, 1),
            ("O", 16, 1),
            ("N", 12, 1),
            ("R", 12, 1),
            ("S", 12, 1),
            ("T", 12, 1),
            ("J", 10, 1),
            ("M", 8, 1),
            ("P", 8, 1),
            ("V", 8, 1),
            # 2 body
            ("K", 8, 2),
            ("B", 6, 2),
            ("D", 7, 2),
            ("G", 5, 2),
            ("L", 7, 2),
            ("U", 9, 2),
            ("Z", 5, 2),
            # 3 body
            ("C", 5, 3),
            ("Č", 3, 3),
            ("Ć", 3, 3),
            ("H", 3, 3),
            ("Ž", 3, 3),
            # 4 body: zriedkavé písmená a dvojznaky
            ("Đ", 2, 4),
            ("DŽ", 2, 4),
            ("F", 2, 4),
            ("LJ", 2, 4),
            ("NJ", 2, 4),
            ("Š", 3, 4),
            (JOKER, 10, 0),
        ]
    ),
)

TILE_DISTRIBUTION: dict[str, int] = SERBIAN.distribution
TILE_POINTS: dict[str, int] = SERBIAN.tile_points
TOTAL_TILES = SERBIAN.total_tiles
SERBIAN_ALPHABET: tuple[str, ...] = tuple(
    letter.letter for letter in SERBIAN.letters if letter.letter != JOKER
)
DIGRAPHS = frozenset({"DŽ", "LJ", "NJ"})


def get_tile_value(letter: str) -> int:
    """Bodová hodnota písmena (0 pre jokera a neznáme písmeno)."""
    return TILE_POINTS.get(letter.upper(), 0) if letter.upper() != JOKER else 0


def get_tile_count(letter: str) -> int:
    return TILE_DISTRIBUTION.get(letter.upper(), 0)


def is_digraph(letter: str) -> bool:
    return letter.upper() in DIGRAPHS


def is_alphabet_letter(letter: str) -> bool:
    return letter.upper() in SERBIAN_ALPHABET


def letter_frequencies(variant: VariantDefinition = SERBIAN) -> dict[str, float]:
    """Relatívna početnosť každého písmena v plnej taške."""
    total = variant.total_tiles
    return {letter.letter: letter.count / total for letter in variant.letters}
