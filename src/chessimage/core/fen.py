"""FEN piece-placement decoding and encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessimage.core.types import Tile, tile_from_rank_file
from chessimage.errors import FenDecodeError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
DEMO_FEN = "rnbqkbnr/ppppp2p/5p2/6pQ/3PP3/8/PPP2PPP/RNB1KBNR b KQkq - 1 3"

PIECE_SYMBOLS = "pnbrqkPNBRQK"


@dataclass(frozen=True, slots=True)
class Position:
    """A piece symbol standing on a tile."""

    tile: Tile
    symbol: str


@dataclass(frozen=True, slots=True)
class LastMove:
    """Origin and destination of the move to highlight."""

    from_tile: Tile
    to_tile: Tile


# Occupied squares in FEN scan order (8th row first, a to h within a row).
Board: TypeAlias = tuple[Position, ...]


def decode_fen(fen: str, *, strict: bool = False) -> Board:
    """Decode the piece-placement field of *fen* into a :data:`Board`.

    Only the first space-delimited field is read; side to move, castling,
    en passant and the clocks are ignored.

    Without *strict*, rows wider than eight squares and a wrong row count are
    accepted and produce off-board tiles.  With *strict* both are rejected.

    Raises:
        FenDecodeError: empty placement field or an unrecognised character.
    """
    fields = fen.split()
    if not fields:
        raise FenDecodeError(f"Invalid FEN (empty placement field): {fen!r}")
    placement = fields[0]

    board: list[Position] = []
    row = 0
    col = 0
    for index, ch in enumerate(placement):
        if ch in "12345678":
            col += int(ch)
        elif ch == "/":
            if strict and col != 8:
                raise FenDecodeError(
                    f"Invalid FEN row width {col} before index {index}: {fen!r}",
                    char=ch,
                    index=index,
                )
            row += 1
            col = 0
        elif ch in PIECE_SYMBOLS:
            if strict and col >= 8:
                raise FenDecodeError(
                    f"Invalid FEN row width at index {index}: {fen!r}",
                    char=ch,
                    index=index,
                )
            board.append(Position(tile_from_rank_file(col, row), ch))
            col += 1
        else:
            raise FenDecodeError(
                f"Invalid FEN character {ch!r} at index {index}: {fen!r}",
                char=ch,
                index=index,
            )
        if strict and col > 8:
            raise FenDecodeError(
                f"Invalid FEN row width at index {index}: {fen!r}",
                char=ch,
                index=index,
            )

    if strict and (row != 7 or col != 8):
        raise FenDecodeError(f"Invalid FEN board (must contain 8 rows of 8): {fen!r}")
    return tuple(board)


def encode_fen(board: Board) -> str:
    """Serialise *board* back to a piece-placement field.

    Raises:
        ValueError: a position lies outside the 64 squares.
    """
    grid: list[list[str | None]] = [[None] * 8 for _ in range(8)]
    for position in board:
        if not 0 <= position.tile < 64:
            raise ValueError(f"Position off the board: {position!r}")
        grid[position.tile.file()][position.tile.rank()] = position.symbol

    rows: list[str] = []
    for cells in grid:
        empty = 0
        row = ""
        for symbol in cells:
            if symbol is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += symbol
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
