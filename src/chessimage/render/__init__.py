"""Rendering package: geometry, sprites and the layer compositor (PyQt6)."""

from chessimage.render.geometry import DrawSize, calc_draw_size
from chessimage.render.options import RenderOptions, Resampler
from chessimage.render.renderer import Renderer, encode_png, save_png
from chessimage.render.resources import PIECE_FILES, clear_sprite_cache, load_sprite
from chessimage.render.theme import BoardTheme

__all__ = [
    "BoardTheme",
    "DrawSize",
    "PIECE_FILES",
    "RenderOptions",
    "Renderer",
    "Resampler",
    "calc_draw_size",
    "clear_sprite_cache",
    "encode_png",
    "load_sprite",
    "save_png",
]
