"""Qt runtime bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtGui import QGuiApplication

_LOGGER = logging.getLogger(__name__)

# Keeps the application created here alive for the life of the process.
_APP: QGuiApplication | None = None


def _is_headless() -> bool:
    return (
        sys.platform.startswith("linux")
        and "DISPLAY" not in os.environ
        and "WAYLAND_DISPLAY" not in os.environ
    )


def ensure_application() -> QCoreApplication:
    """Return the running Qt application, creating a ``QGuiApplication`` if needed.

    SVG rasterisation needs a GUI application object.  On
    headless Linux hosts the ``offscreen`` platform is selected unless
    ``QT_QPA_PLATFORM`` is already set.
    """
    app = QCoreApplication.instance()
    if app is not None:
        return app

    if _is_headless() and "QT_QPA_PLATFORM" not in os.environ:
        os.environ["QT_QPA_PLATFORM"] = "offscreen"
        _LOGGER.debug("No display found; using the offscreen Qt platform")

    global _APP
    _LOGGER.debug("Creating QGuiApplication")
    _APP = QGuiApplication([sys.argv[0] if sys.argv else "chessimage"])
    return _APP
