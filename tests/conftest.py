"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QGuiApplication for rendering tests."""
    from chessimage.render.bootstrap import ensure_application

    yield ensure_application()


@pytest.fixture(autouse=True)
def _clear_sprite_cache() -> Iterator[None]:
    """Keep the process-wide sprite cache from leaking between tests."""
    from chessimage.render.resources import clear_sprite_cache

    clear_sprite_cache()
    yield
    clear_sprite_cache()


@pytest.fixture
def png_asset_dir(tmp_path, qapp):
    """Directory with a full set of solid-blue 16×16 piece PNGs."""
    from PyQt6.QtGui import QColor, QImage

    from chessimage.render.resources import PIECE_FILES

    for filename in PIECE_FILES.values():
        image = QImage(16, 16, QImage.Format.Format_ARGB32)
        image.fill(QColor(0, 0, 255))
        assert image.save(str(tmp_path / filename), "PNG")
    return tmp_path
