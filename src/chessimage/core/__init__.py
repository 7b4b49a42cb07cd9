"""Board model: tiles, algebraic lookup and FEN placement decoding.

Nothing in this package imports Qt.

Quick start::

    from chessimage.core import decode_fen, tile_from_algebraic

    board = decode_fen("8/8/4k3/8/8/4K3/8/8 w - - 0 1")
    e5 = tile_from_algebraic("e5")
"""

from chessimage.core.fen import (
    DEMO_FEN,
    PIECE_SYMBOLS,
    STARTING_FEN,
    Board,
    LastMove,
    Position,
    decode_fen,
    encode_fen,
)
from chessimage.core.types import (
    NO_TILE,
    TILES_BY_NAME,
    Tile,
    tile_from_algebraic,
    tile_from_rank_file,
)

__all__ = [
    # Tiles
    "NO_TILE",
    "TILES_BY_NAME",
    "Tile",
    "tile_from_algebraic",
    "tile_from_rank_file",
    # Board model
    "Board",
    "LastMove",
    "Position",
    # FEN
    "DEMO_FEN",
    "PIECE_SYMBOLS",
    "STARTING_FEN",
    "decode_fen",
    "encode_fen",
]
