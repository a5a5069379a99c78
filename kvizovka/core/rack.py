"""Pomocné funkcie pre manipuláciu so stojanom hráča.

Funkcie sú čisté (okrem `refill_rack`, ktorá ťahá z tašky), aby sa dali
jednoducho testovať bez orchestrácie.
"""
from __future__ import annotations

from typing import Iterable

from .distribution import TILES_PER_PLAYER, is_alphabet_letter
from .tiles import TileBag
from .types import PlacedTile, Tile


def consume_rack(rack: list[Tile], placed_tiles: Iterable[PlacedTile]) -> list[Tile]:
    """Vráti nový stojan bez kociek položených v ťahu.

    Kocky sa odoberajú podľa `id`, nie podľa písmena, takže dve rovnaké
    písmená sú stále rozlíšiteľné. Poradie zvyšných kociek sa zachová.
    """
    used = {p.tile.id for p in placed_tiles}
    return [tile for tile in rack if tile.id not in used]


def missing_from_rack(rack: list[Tile], tiles: Iterable[Tile]) -> list[str]:
    """Id kociek, ktoré hráč na stojane nemá."""
    ids = {tile.id for tile in rack}
    return [tile.id for tile in tiles if tile.id not in ids]


def assign_joker_letter(rack: list[Tile], tile_id: str, letter: str | None) -> list[Tile]:
    """Nastaví (alebo zruší pri `None`) zvolené písmeno jokera na stojane."""
    if letter is not None and not is_alphabet_letter(letter):
        raise ValueError(f"'{letter}' nie je písmeno srbskej abecedy")
    out: list[Tile] = []
    found = False
    for tile in rack:
        if tile.id == tile_id:
            out.append(tile.with_joker_letter(letter))
            found = True
        else:
            out.append(tile)
    if not found:
        raise ValueError(f"Kocka {tile_id} nie je na stojane")
    return out


def clear_joker_letters(rack: list[Tile]) -> list[Tile]:
    return [tile.with_joker_letter(None) if tile.is_joker else tile for tile in rack]


def refill_rack(rack: list[Tile], bag: TileBag, size: int = TILES_PER_PLAYER) -> list[Tile]:
    """Doplní stojan z tašky na `size` kociek a vráti potiahnuté kocky.

    Pri takmer prázdnej taške môže potiahnuť menej.
    """
    drawn = bag.draw(max(0, size - len(rack)))
    rack.extend(drawn)
    return drawn
