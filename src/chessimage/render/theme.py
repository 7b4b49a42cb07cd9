"""Board colour scheme."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Square, highlight and label colours used by the renderer."""

    light_square: QColor
    dark_square: QColor
    highlight_light: QColor  # last move on a light square
    highlight_dark: QColor  # last move on a dark square
    check: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_light=QColor(247, 193, 99),
            highlight_dark=QColor(215, 149, 54),
            check=QColor(255, 0, 0),
        )

    def square(self, is_light: bool) -> QColor:
        return self.light_square if is_light else self.dark_square

    def highlight(self, is_light: bool) -> QColor:
        return self.highlight_light if is_light else self.highlight_dark
