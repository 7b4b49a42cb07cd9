"""Exception types raised by chessimage."""

from __future__ import annotations


class ChessImageError(Exception):
    """Base class for every error raised by this package."""


class FenDecodeError(ChessImageError, ValueError):
    """The piece-placement field of a FEN string could not be decoded."""

    def __init__(self, message: str, *, char: str = "", index: int = -1) -> None:
        super().__init__(message)
        self.char = char
        self.index = index


class TileNotFoundError(ChessImageError, LookupError):
    """An algebraic square name has no matching tile."""

    def __init__(self, name: str) -> None:
        super().__init__(f"tile {name!r} not found")
        self.name = name


class AssetError(ChessImageError, OSError):
    """A piece sprite is missing or cannot be decoded."""

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path
