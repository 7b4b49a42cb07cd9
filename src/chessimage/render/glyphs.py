"""Fixed 5×7 bitmap glyphs for the coordinate labels.

Each glyph is a tuple of rows, top to bottom; ``#`` marks a set pixel.  The
first seven rows sit above the baseline, any further rows are descenders.
"""

from __future__ import annotations

from PyQt6.QtGui import QColor, QPainter

GLYPH_WIDTH = 5
GLYPH_ASCENT = 7

GLYPHS: dict[str, tuple[str, ...]] = {
    "a": ("     ", "     ", " ### ", "    #", " ####", "#   #", " ####"),
    "b": ("#    ", "#    ", "#### ", "#   #", "#   #", "#   #", "#### "),
    "c": ("     ", "     ", " ####", "#    ", "#    ", "#    ", " ####"),
    "d": ("    #", "    #", " ####", "#   #", "#   #", "#   #", " ####"),
    "e": ("     ", "     ", " ### ", "#   #", "#####", "#    ", " ####"),
    "f": ("  ## ", " #   ", "#### ", " #   ", " #   ", " #   ", " #   "),
    "g": (
        "     ", "     ", " ####", "#   #", "#   #", "#   #", " ####",
        "    #", " ### ",
    ),
    "h": ("#    ", "#    ", "#### ", "#   #", "#   #", "#   #", "#   #"),
    "1": ("  #  ", " ##  ", "  #  ", "  #  ", "  #  ", "  #  ", " ### "),
    "2": (" ### ", "#   #", "    #", "   # ", "  #  ", " #   ", "#####"),
    "3": (" ### ", "#   #", "    #", "  ## ", "    #", "#   #", " ### "),
    "4": ("   # ", "  ## ", " # # ", "#  # ", "#####", "   # ", "   # "),
    "5": ("#####", "#    ", "#### ", "    #", "    #", "#   #", " ### "),
    "6": (" ### ", "#    ", "#    ", "#### ", "#   #", "#   #", " ### "),
    "7": ("#####", "    #", "   # ", "  #  ", " #   ", " #   ", " #   "),
    "8": (" ### ", "#   #", "#   #", " ### ", "#   #", "#   #", " ### "),
}


def draw_glyph(
    painter: QPainter, char: str, x: int, baseline: int, color: QColor
) -> None:
    """Draw *char* with its left edge at *x*, resting on *baseline*.

    Raises:
        KeyError: no glyph exists for *char*.
    """
    top = baseline - GLYPH_ASCENT
    for row, bits in enumerate(GLYPHS[char]):
        for col, bit in enumerate(bits):
            if bit == "#":
                painter.fillRect(x + col, top + row, 1, 1, color)
