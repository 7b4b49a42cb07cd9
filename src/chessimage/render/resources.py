"""Piece sprite loading and scaling."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Union

from PyQt6.QtCore import QByteArray, QRectF, Qt
from PyQt6.QtGui import QImage, QPainter
from PyQt6.QtSvg import QSvgRenderer

from chessimage.errors import AssetError
from chessimage.render.bootstrap import ensure_application
from chessimage.render.options import Resampler
from chessimage.runtime_assets import ASSETS_PREFIX, package_root

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

_LOGGER = logging.getLogger(__name__)

# File names encode piece and colour: "d" = dark (black), "l" = light (white).
PIECE_FILES: dict[str, str] = {
    "b": "bd.png",
    "B": "bl.png",
    "k": "kd.png",
    "K": "kl.png",
    "n": "nd.png",
    "N": "nl.png",
    "p": "pd.png",
    "P": "pl.png",
    "q": "qd.png",
    "Q": "ql.png",
    "r": "rd.png",
    "R": "rl.png",
}

# Directory-like roots accepted for caller-supplied sprites.
SpriteSource = Union["Traversable", str, os.PathLike]

# The bundled set is vector artwork rasterised on load.
_BUNDLED_SUFFIX = ".svg"

# Optional cache of scaled sprites: (root, path, size, resampler) -> image
_sprite_cache: dict[tuple[str, str, int, Resampler], QImage] = {}


def sprite_location(
    symbol: str, source: SpriteSource | None, asset_path: str = ""
) -> tuple[Traversable, str]:
    """Resolve the root and relative path of the sprite for *symbol*.

    Caller sources use the PNG names of :data:`PIECE_FILES` under
    *asset_path*.  The bundled set (*source* is ``None``) lives under
    ``assets/`` and uses the same stems with an ``.svg`` suffix.  String and
    ``os.PathLike`` sources are treated as directories.
    """
    try:
        filename = PIECE_FILES[symbol]
    except KeyError:
        raise AssetError(f"No sprite for piece symbol {symbol!r}") from None

    if source is None:
        stem = filename.rsplit(".", 1)[0]
        return package_root(), ASSETS_PREFIX + asset_path + stem + _BUNDLED_SUFFIX
    if isinstance(source, (str, os.PathLike)):
        source = Path(source)
    return source, asset_path + filename


def _decode(data: bytes, path: str) -> QImage:
    if path.lower().endswith(".svg"):
        renderer = QSvgRenderer(QByteArray(data))
        if not renderer.isValid():
            raise AssetError(f"Invalid SVG sprite: {path}", path=path)
        size = renderer.defaultSize()
        image = QImage(size, QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(Qt.GlobalColor.transparent)
        painter = QPainter(image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        renderer.render(painter, QRectF(0, 0, size.width(), size.height()))
        painter.end()
        return image

    image = QImage()
    if not image.loadFromData(data):
        raise AssetError(f"Cannot decode sprite image: {path}", path=path)
    return image


def load_sprite(
    symbol: str, source: SpriteSource | None = None, asset_path: str = ""
) -> QImage:
    """Read and decode the sprite for *symbol*.

    Raises:
        AssetError: the symbol is unknown, or the file is missing or is not
            a decodable image.
    """
    ensure_application()
    root, path = sprite_location(symbol, source, asset_path)
    _LOGGER.debug("Loading sprite %s from %s", path, root)
    try:
        data = root.joinpath(path).read_bytes()
    except OSError as exc:
        raise AssetError(f"Cannot read sprite {path}: {exc}", path=path) from exc
    return _decode(data, path)


def scale_sprite(sprite: QImage, size: int, resampler: Resampler) -> QImage:
    """Scale *sprite* to *size* × *size*, composited over a transparent tile.

    A non-positive *size* yields a null image.
    """
    if size <= 0:
        return QImage()
    scaled = sprite.scaled(
        size,
        size,
        Qt.AspectRatioMode.IgnoreAspectRatio,
        resampler.transformation_mode,
    )
    tile = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    tile.fill(Qt.GlobalColor.transparent)
    painter = QPainter(tile)
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)
    painter.drawImage(0, 0, scaled)
    painter.end()
    return tile


def piece_sprite(
    symbol: str,
    size: int,
    resampler: Resampler,
    source: SpriteSource | None = None,
    asset_path: str = "",
    *,
    cached: bool = False,
) -> QImage:
    """Return the sprite for *symbol* scaled to *size* pixels.

    With *cached* the scaled image is kept for the life of the process and
    reused by later calls with the same source, path, size and resampler.
    """
    if not cached:
        return scale_sprite(load_sprite(symbol, source, asset_path), size, resampler)

    root, path = sprite_location(symbol, source, asset_path)
    key = (str(root), path, size, resampler)
    image = _sprite_cache.get(key)
    if image is None:
        image = scale_sprite(load_sprite(symbol, source, asset_path), size, resampler)
        _sprite_cache[key] = image
    return image


def clear_sprite_cache() -> None:
    """Drop every cached sprite."""
    _sprite_cache.clear()
