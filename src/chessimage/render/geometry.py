"""Pixel geometry derived from the rendering options."""

from __future__ import annotations

from dataclasses import dataclass

from chessimage.render.options import RenderOptions


@dataclass(frozen=True, slots=True)
class DrawSize:
    grid_size: int
    piece_size: int
    piece_offset: int


def calc_draw_size(options: RenderOptions) -> DrawSize:
    """Derive cell size, sprite size and sprite centering offset.

    The cell size is truncated, so a board size that is not a multiple of
    eight leaves an unpainted strip along the right and bottom edges.
    """
    grid_size = options.board_size // 8
    piece_size = int(grid_size * options.piece_ratio)
    return DrawSize(
        grid_size=grid_size,
        piece_size=piece_size,
        piece_offset=(grid_size - piece_size) // 2,
    )


def cell_origin(rank: int, file: int, draw_size: DrawSize) -> tuple[int, int]:
    """Top-left pixel of the cell at column *rank*, row *file*."""
    return rank * draw_size.grid_size, file * draw_size.grid_size
