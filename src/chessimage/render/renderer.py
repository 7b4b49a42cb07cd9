"""Renderer — composites the board, highlights, labels and pieces into a QImage."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice, Qt
from PyQt6.QtGui import QColor, QImage, QPainter

from chessimage.core.fen import Board, LastMove, decode_fen
from chessimage.core.types import NO_TILE, Tile
from chessimage.render.bootstrap import ensure_application
from chessimage.render.geometry import DrawSize, calc_draw_size, cell_origin
from chessimage.render.glyphs import draw_glyph
from chessimage.render.options import RenderOptions
from chessimage.render.resources import piece_sprite
from chessimage.render.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

FILE_SYMBOLS = "abcdefgh"
FILE_SYMBOLS_REVERSE = "hgfedcba"
RANK_SYMBOLS = "12345678"
RANK_SYMBOLS_REVERSE = "87654321"

# Label placement relative to the cell and the board edge (text baseline).
_FILE_LABEL_INSET_X = 2
_FILE_LABEL_BASELINE_FROM_BOTTOM = 3
_RANK_LABEL_INSET_FROM_RIGHT = 10
_RANK_LABEL_BASELINE_Y = 12


class Renderer:
    """Draws one decoded position into raster images.

    The board is decoded once at construction.  The check tile and last move
    are kept between calls; every :meth:`render` call allocates its own
    canvas.  Not safe for concurrent use.
    """

    def __init__(self, fen: str, *, strict: bool = False) -> None:
        self._board: Board = decode_fen(fen, strict=strict)
        self._check_tile: Tile = NO_TILE
        self._last_move: LastMove | None = None
        self._theme = BoardTheme.default()

    @classmethod
    def from_fen(cls, fen: str, *, strict: bool = False) -> Renderer:
        return cls(fen, strict=strict)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def check_tile(self) -> Tile:
        return self._check_tile

    @property
    def last_move(self) -> LastMove | None:
        return self._last_move

    def set_check_tile(self, tile: Tile) -> None:
        """Paint *tile* red on later renders; ``NO_TILE`` disables it.

        The tile is not range-checked.
        """
        self._check_tile = Tile(tile)

    def set_last_move(self, last_move: LastMove) -> None:
        """Highlight the origin and destination of *last_move* on later renders."""
        self._last_move = last_move

    def clear_last_move(self) -> None:
        self._last_move = None

    def render(self, options: RenderOptions | None = None) -> QImage:
        """Render the board with *options* and return the finished image.

        Raises:
            AssetError: a piece sprite could not be loaded.  No partial image
                is returned.
        """
        ensure_application()
        opts = (options or RenderOptions()).normalized()
        draw_size = calc_draw_size(opts)
        _LOGGER.debug(
            "Rendering %d pieces at %dpx (cell %d, piece %d, inverted=%s)",
            len(self._board),
            opts.board_size,
            draw_size.grid_size,
            draw_size.piece_size,
            opts.inverted,
        )

        canvas = QImage(opts.board_size, opts.board_size, QImage.Format.Format_ARGB32)
        canvas.fill(Qt.GlobalColor.transparent)

        painter = QPainter(canvas)
        try:
            self._draw_background(painter, draw_size)
            self._draw_last_move(painter, draw_size, opts.inverted)
            self._draw_check_tile(painter, draw_size, opts.inverted)
            self._draw_labels(painter, draw_size, opts)
            self._draw_pieces(painter, draw_size, opts)
        finally:
            painter.end()
        return canvas

    # ── Layers ───────────────────────────────────────────────────────────

    def _fill_cell(
        self,
        painter: QPainter,
        rank: int,
        file: int,
        draw_size: DrawSize,
        color: QColor,
    ) -> None:
        x, y = cell_origin(rank, file, draw_size)
        painter.fillRect(x, y, draw_size.grid_size, draw_size.grid_size, color)

    def _draw_background(self, painter: QPainter, draw_size: DrawSize) -> None:
        for row in range(8):
            for col in range(8):
                is_light = (row + col) % 2 == 0
                color = self._theme.square(is_light)
                self._fill_cell(painter, col, row, draw_size, color)

    @staticmethod
    def _visual(tile: Tile, inverted: bool) -> tuple[int, int]:
        tile = Tile(tile)
        if inverted:
            return tile.rank_inverted(), tile.file_inverted()
        return tile.rank(), tile.file()

    def _draw_last_move(
        self, painter: QPainter, draw_size: DrawSize, inverted: bool
    ) -> None:
        if self._last_move is None:
            return
        # Origin first so the destination wins when both coincide.
        for tile in (self._last_move.from_tile, self._last_move.to_tile):
            rank, file = self._visual(tile, inverted)
            is_light = rank % 2 == file % 2
            color = self._theme.highlight(is_light)
            self._fill_cell(painter, rank, file, draw_size, color)

    def _draw_check_tile(
        self, painter: QPainter, draw_size: DrawSize, inverted: bool
    ) -> None:
        if self._check_tile == NO_TILE:
            return
        rank, file = self._visual(self._check_tile, inverted)
        self._fill_cell(painter, rank, file, draw_size, self._theme.check)

    def _draw_labels(
        self, painter: QPainter, draw_size: DrawSize, opts: RenderOptions
    ) -> None:
        grid = draw_size.grid_size
        baseline = opts.board_size - _FILE_LABEL_BASELINE_FROM_BOTTOM
        files = FILE_SYMBOLS_REVERSE if opts.inverted else FILE_SYMBOLS
        for i, symbol in enumerate(files):
            color = self._theme.square(i % 2 == 0)
            draw_glyph(painter, symbol, grid * i + _FILE_LABEL_INSET_X, baseline, color)

        x = opts.board_size - _RANK_LABEL_INSET_FROM_RIGHT
        ranks = RANK_SYMBOLS if opts.inverted else RANK_SYMBOLS_REVERSE
        for i, symbol in enumerate(ranks):
            color = self._theme.square(i % 2 == 0)
            draw_glyph(painter, symbol, x, grid * i + _RANK_LABEL_BASELINE_Y, color)

    def _draw_pieces(
        self, painter: QPainter, draw_size: DrawSize, opts: RenderOptions
    ) -> None:
        for position in self._board:
            sprite = piece_sprite(
                position.symbol,
                draw_size.piece_size,
                opts.resampler,
                opts.asset_source,
                opts.asset_path,
                cached=opts.cache_sprites,
            )
            if sprite.isNull():
                continue
            rank, file = self._visual(position.tile, opts.inverted)
            x, y = cell_origin(rank, file, draw_size)
            painter.drawImage(
                x + draw_size.piece_offset, y + draw_size.piece_offset, sprite
            )


def encode_png(image: QImage) -> bytes:
    """Encode *image* as PNG bytes.

    Raises:
        OSError: Qt could not encode the image.
    """
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    ok = image.save(buffer, "PNG")
    buffer.close()
    if not ok:
        raise OSError("Failed to encode image as PNG")
    return bytes(data)


def save_png(image: QImage, path: str | Path) -> None:
    """Write *image* to *path* as PNG.

    Raises:
        OSError: the file could not be written.
    """
    if not image.save(str(path), "PNG"):
        raise OSError(f"Failed to write PNG: {path}")
    _LOGGER.debug("Wrote %s", path)
