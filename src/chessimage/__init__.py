"""Render chess positions given in FEN to raster images.

Quick start::

    from chessimage import LastMove, Renderer, save_png
    from chessimage.core.types import D1, E8, H5

    renderer = Renderer("rnbqkbnr/ppppp2p/5p2/6pQ/3PP3/8/PPP2PPP/RNB1KBNR b KQkq - 1 3")
    renderer.set_last_move(LastMove(D1, H5))
    renderer.set_check_tile(E8)
    save_png(renderer.render(), "board.png")
"""

from chessimage.core import (
    DEMO_FEN,
    NO_TILE,
    STARTING_FEN,
    Board,
    LastMove,
    Position,
    Tile,
    decode_fen,
    encode_fen,
    tile_from_algebraic,
    tile_from_rank_file,
)
from chessimage.errors import (
    AssetError,
    ChessImageError,
    FenDecodeError,
    TileNotFoundError,
)
from chessimage.render import RenderOptions, Renderer, Resampler, encode_png, save_png

__version__ = "0.1.0"

__all__ = [
    "AssetError",
    "Board",
    "ChessImageError",
    "DEMO_FEN",
    "FenDecodeError",
    "LastMove",
    "NO_TILE",
    "Position",
    "RenderOptions",
    "Renderer",
    "Resampler",
    "STARTING_FEN",
    "Tile",
    "TileNotFoundError",
    "decode_fen",
    "encode_fen",
    "encode_png",
    "save_png",
    "tile_from_algebraic",
    "tile_from_rank_file",
]
