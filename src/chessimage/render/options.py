"""Rendering options."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

DEFAULT_BOARD_SIZE = 512
DEFAULT_PIECE_RATIO = 0.9


class Resampler(Enum):
    """Algorithm used to scale piece sprites to the cell size."""

    SMOOTH = "smooth"
    FAST = "fast"

    @property
    def transformation_mode(self) -> Qt.TransformationMode:
        if self is Resampler.FAST:
            return Qt.TransformationMode.FastTransformation
        return Qt.TransformationMode.SmoothTransformation


@dataclass(frozen=True)
class RenderOptions:
    """Caller-facing configuration for :meth:`Renderer.render`.

    Args:
        board_size: Side of the square output image in pixels.
        piece_ratio: Piece sprite size relative to one cell.
        resampler: Sprite scaling algorithm.
        inverted: Draw the board from black's side.
        asset_source: Directory (path string, ``Path`` or
            ``importlib.resources`` traversable) holding the piece sprites.  ``None`` selects the
            bundled sprite set.
        asset_path: Prefix joined in front of each sprite file name.
        cache_sprites: Reuse decoded, scaled sprites across renders.
    """

    board_size: int = DEFAULT_BOARD_SIZE
    piece_ratio: float = DEFAULT_PIECE_RATIO
    resampler: Resampler | None = Resampler.SMOOTH
    inverted: bool = False
    asset_source: Traversable | str | os.PathLike | None = None
    asset_path: str = ""
    cache_sprites: bool = False

    def normalized(self) -> RenderOptions:
        """Return a copy with non-positive sizes replaced by the defaults."""
        changes: dict[str, object] = {}
        if self.board_size <= 0:
            changes["board_size"] = DEFAULT_BOARD_SIZE
        if self.piece_ratio <= 0.0:
            changes["piece_ratio"] = DEFAULT_PIECE_RATIO
        if self.resampler is None:
            changes["resampler"] = Resampler.SMOOTH
        if not changes:
            return self
        return replace(self, **changes)
