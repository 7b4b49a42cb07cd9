"""Helpers for locating the bundled piece sprites."""

from __future__ import annotations

from importlib.resources import files
from importlib.resources.abc import Traversable

ASSETS_PREFIX = "assets/"


def package_root() -> Traversable:
    """Return the installed ``chessimage`` package as a traversable root."""
    return files("chessimage")

