from __future__ import annotations

import logging
from typing import Iterable

from .layout import (
    BOARD_CENTER,
    BOARD_SIZE,
    get_adjacent_positions,
    get_premium_field,
    is_valid_position,
)
from .types import BlockerTile, Direction, Occupant, PlacedTile, Square

log = logging.getLogger("kvizovka.board")


class Board:
    """Model dosky 17x17 s prémiami a blokovacími kockami.

    Prístup mimo dosky nikdy nevyhadzuje výnimku: vracia None/False.
    """

    def __init__(self) -> None:
        self.cells: list[list[Square]] = []
        self.initialize()

    def initialize(self) -> None:
        """Vytvorí všetkých 289 polí s prémiami; vždy začína s prázdnou doskou."""
        self.cells = [
            [Square(row=r, col=c, premium_field=get_premium_field(r, c)) for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]

    def reset(self) -> None:
        self.initialize()

    def is_valid_position(self, row: int, col: int) -> bool:
        return is_valid_position(row, col)

    def get_square(self, row: int, col: int) -> Square | None:
        if not self.is_valid_position(row, col):
            return None
        return self.cells[row][col]

    def get_tile(self, row: int, col: int) -> Occupant | None:
        square = self.get_square(row, col)
        return square.tile if square else None

    def set_tile(self, row: int, col: int, tile: Occupant | None) -> bool:
        """Položí kocku na pole (bez validácie pravidiel).

        Prémie sa tu neoznačujú ako použité; to robí `mark_squares_as_used`
        až po výpočte skóre.
        """
        square = self.get_square(row, col)
        if square is None:
            return False
        square.tile = tile
        return True

    def remove_tile(self, row: int, col: int) -> Occupant | None:
        square = self.get_square(row, col)
        if square is None:
            return None
        tile, square.tile = square.tile, None
        return tile

    def is_empty(self, row: int, col: int) -> bool:
        """True pre voľné pole na doske; mimo dosky False."""
        square = self.get_square(row, col)
        return square is not None and square.tile is None

    def is_blocker(self, row: int, col: int) -> bool:
        square = self.get_square(row, col)
        return square is not None and square.has_blocker

    def has_letter(self, row: int, col: int) -> bool:
        """Či je na poli kocka s písmenom (nie blokátor)."""
        square = self.get_square(row, col)
        return square is not None and square.letter_tile is not None

    def is_empty_board(self) -> bool:
        return all(cell.tile is None for row in self.cells for cell in row)

    def occupied_positions(self) -> list[tuple[int, int]]:
        return [(cell.row, cell.col) for row in self.cells for cell in row if cell.tile is not None]

    def touches_center(self, row: int, col: int) -> bool:
        """Pole je stred alebo ortogonálne susedí so stredom."""
        if (row, col) == BOARD_CENTER:
            return True
        return BOARD_CENTER in get_adjacent_positions(row, col)

    def get_tiles_in_line(self, row: int, col: int, direction: Direction) -> list[Square]:
        """Vráti polia celého slova prechádzajúceho daným polom v danom smere.

        Slovo končí na prázdnom poli, blokátore alebo okraji dosky.
        """
        if not self.has_letter(row, col):
            return []
        dr, dc = direction.delta
        r, c = row, col
        # posun doľava/nahor na začiatok slova
        while self.has_letter(r - dr, c - dc):
            r -= dr
            c -= dc
        squares: list[Square] = []
        # doplň doprava/nadol
        while self.has_letter(r, c):
            squares.append(self.cells[r][c])
            r += dr
            c += dc
        return squares

    def place_blockers(self, placed_tiles: list[PlacedTile], direction: Direction) -> list[tuple[int, int]]:
        """Položí blokátor pred prvú a za poslednú kocku ťahu.

        Len na pole v rámci dosky, ktoré je voľné; nič neprepisuje.
        Vráti pozície, kam sa blokátor naozaj položil.
        """
        if not placed_tiles:
            return []
        axis = (lambda p: p.col) if direction is Direction.HORIZONTAL else (lambda p: p.row)
        ordered = sorted(placed_tiles, key=axis)
        first, last = ordered[0], ordered[-1]
        dr, dc = direction.delta

        placed: list[tuple[int, int]] = []
        for r, c in ((first.row - dr, first.col - dc), (last.row + dr, last.col + dc)):
            if self.is_empty(r, c):
                self.set_tile(r, c, BlockerTile(id=f"blocker-{r}-{c}"))
                placed.append((r, c))
        log.debug("blockers_placed positions=%s", placed)
        return placed

    def get_adjacent_occupied_squares(self, row: int, col: int) -> list[Square]:
        out: list[Square] = []
        for r, c in get_adjacent_positions(row, col):
            square = self.cells[r][c]
            if square.tile is not None:
                out.append(square)
        return out

    def are_connected(self, placed_tiles: list[PlacedTile]) -> bool:
        """Aspoň jedna nová kocka musí susediť s už položeným písmenom.

        Na prázdnej doske vždy True (prvý ťah rieši pravidlo stredu).
        Blokátory ani kocky tohto ťahu sa za spojenie nepočítajú.
        """
        if self.is_empty_board():
            return True
        new_positions = {p.position for p in placed_tiles}
        for p in placed_tiles:
            for square in self.get_adjacent_occupied_squares(p.row, p.col):
                if square.letter_tile is not None and (square.row, square.col) not in new_positions:
                    return True
        return False

    def mark_squares_as_used(self, placed_tiles: Iterable[PlacedTile]) -> None:
        """Po vyhodnotení ťahu označ prémie nových polí ako použité.

        Volať až po výpočte skóre, inak by ťah prišiel o svoje násobky.
        """
        for p in placed_tiles:
            square = self.get_square(p.row, p.col)
            if square and square.premium_field and not square.is_used:
                square.is_used = True
                log.debug(
                    "premium_used row=%s col=%s field=%s", p.row, p.col, square.premium_field.name
                )

    def get_grid(self) -> list[list[Square]]:
        """Kópia všetkých polí (na vykreslenie alebo uloženie)."""
        return [[cell.snapshot() for cell in row] for row in self.cells]

    def clone(self) -> Board:
        """Nezávislá kópia dosky (kocky aj príznaky použitia prémií).

        Kocky sú nemenné, takže ich zdieľanie medzi kópiami je bezpečné.
        """
        other = Board()
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                src, dst = self.cells[r][c], other.cells[r][c]
                dst.tile = src.tile
                dst.is_used = src.is_used
        return other

