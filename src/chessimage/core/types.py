"""Tile type and coordinate helpers.

Board layout (row-major from the black side, as drawn):
    a8=0, b8=1, ..., h8=7
    a7=8, b7=9, ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

The projections keep the historical axis naming of the renderer:
``rank()`` is the column (index mod 8) and ``file()`` is the row counted
from the top edge (index div 8).  This split keeps
``tile_from_rank_file(t.rank(), t.file()) == t``.  Every pixel computation in
:mod:`chessimage.render` relies on that convention.
"""

from __future__ import annotations

from types import MappingProxyType

from chessimage.errors import TileNotFoundError


class Tile(int):
    """Immutable board square index in 0–63, or -1 for "no tile".

    Values are not range-checked; an out-of-range tile yields out-of-range
    pixel geometry downstream.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Tile({int(self)})"

    def rank(self) -> int:
        """Column index 0–7 (a–h when not inverted)."""
        return int(self) % 8

    def file(self) -> int:
        """Row index 0–7 counted from the top edge (8th row first)."""
        return int(self) // 8

    def rank_inverted(self) -> int:
        return 7 - self.rank()

    def file_inverted(self) -> int:
        return 7 - self.file()

    @property
    def algebraic(self) -> str:
        """Square name, e.g. ``Tile(28).algebraic == 'e5'``; ``'-'`` if unknown."""
        return _NAME_BY_TILE.get(self, "-")


NO_TILE = Tile(-1)


def tile_from_rank_file(rank: int, file: int) -> Tile:
    """Inverse of :meth:`Tile.rank` / :meth:`Tile.file`."""
    return Tile(file * 8 + rank)


# ── Named tile constants ────────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Tile(i) for i in range(0, 8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Tile(i) for i in range(8, 16))
A6, B6, C6, D6, E6, F6, G6, H6 = (Tile(i) for i in range(16, 24))
A5, B5, C5, D5, E5, F5, G5, H5 = (Tile(i) for i in range(24, 32))
A4, B4, C4, D4, E4, F4, G4, H4 = (Tile(i) for i in range(32, 40))
A3, B3, C3, D3, E3, F3, G3, H3 = (Tile(i) for i in range(40, 48))
A2, B2, C2, D2, E2, F2, G2, H2 = (Tile(i) for i in range(48, 56))
A1, B1, C1, D1, E1, F1, G1, H1 = (Tile(i) for i in range(56, 64))


def _build_tile_table() -> dict[str, Tile]:
    table: dict[str, Tile] = {}
    for row in range(8):
        for col in range(8):
            name = "abcdefgh"[col] + str(8 - row)
            table[name] = tile_from_rank_file(col, row)
    return table


# Read-only after import.
TILES_BY_NAME = MappingProxyType(_build_tile_table())
_NAME_BY_TILE = MappingProxyType({tile: name for name, tile in TILES_BY_NAME.items()})


def tile_from_algebraic(name: str) -> Tile:
    """Look up a tile by its algebraic name, e.g. ``'e5'``.

    The lookup is exact and case-sensitive.

    Raises:
        TileNotFoundError: *name* is not one of ``a1`` … ``h8``.
    """
    try:
        return TILES_BY_NAME[name]
    except (KeyError, TypeError):
        raise TileNotFoundError(str(name)) from None
