"""
Shared Qt styling helpers.
"""
from __future__ import annotations

from PySide6.QtGui import QColor, QFont

from matrixdiagrams.config import FONT_FAMILY, FONT_POINT_SIZE, HIGHLIGHT_COLORS


def qcolor(css: str) -> QColor:
    """
    Convert CSS-style ``#rrggbb`` / ``#rrggbbaa`` to a QColor.

    QColor itself reads 8-digit hex as ``#aarrggbb``, so the alpha is moved here.
    """
    text = css.lstrip("#")
    if len(text) == 8:
        r, g, b, a = (int(text[i:i + 2], 16) for i in range(0, 8, 2))
        return QColor(r, g, b, a)
    return QColor(css)


def highlight_color(style: str) -> QColor:
    """Colour for a highlight style key; unknown keys are treated as colour literals."""
    return qcolor(HIGHLIGHT_COLORS.get(style, style))


def diagram_font(scale: float = 1.0) -> QFont:
    font = QFont(FONT_FAMILY)
    font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPointSizeF(FONT_POINT_SIZE * scale)
    return font
