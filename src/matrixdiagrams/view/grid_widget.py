"""
Matrix Grid Widget
==================
Renders one ``GridView`` as a bracketed grid of labels with rounded highlight
bands painted behind the cells.

Why is this file needed?
------------------------
1. Interaction: It owns the raw-pointer-to-cell mapping. Mouse moves are
   resolved to (row, column) and forwarded to ``GridView.on_hover``; leaving
   the grid forwards (-1, -1).
2. Rendering: It observes the GridView and repaints when text or highlight
   state changes. It never changes the state itself.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QPoint, QRect, QRectF
from PySide6.QtGui import QPainter, QPen, QMouseEvent, QPaintEvent
from PySide6.QtWidgets import QWidget, QGridLayout, QLabel, QSizePolicy

from matrixdiagrams.config import BRACKET_WIDTH, FOREGROUND_COLOR, GRID_PADDING, HIGHLIGHT_RADIUS
from matrixdiagrams.model.grid import GridView, HighlightState, LEAVE
from matrixdiagrams.view.style import diagram_font, highlight_color, qcolor


class BracketWidget(QWidget):
    """A tall square bracket, ``[`` or ``]``."""
    def __init__(self, side: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.side = side
        self.setFixedWidth(12)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Expanding)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setPen(QPen(qcolor(FOREGROUND_COLOR), BRACKET_WIDTH))
        half = BRACKET_WIDTH // 2
        r = self.rect().adjusted(half, half, -half, -half)
        if self.side == "left":
            painter.drawLine(r.topRight(), r.topLeft())
            painter.drawLine(r.topLeft(), r.bottomLeft())
            painter.drawLine(r.bottomLeft(), r.bottomRight())
        else:
            painter.drawLine(r.topLeft(), r.topRight())
            painter.drawLine(r.topRight(), r.bottomRight())
            painter.drawLine(r.bottomRight(), r.bottomLeft())
        painter.end()


class MatrixGridWidget(QWidget):
    def __init__(self, grid: GridView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.grid = grid
        self._hovered: tuple[int, int] = LEAVE

        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, False)

        layout = QGridLayout(self)
        layout.setContentsMargins(GRID_PADDING, GRID_PADDING, GRID_PADDING, GRID_PADDING)
        layout.setHorizontalSpacing(8)
        layout.setVerticalSpacing(8)

        # The first and last layout columns hold the brackets.
        layout.addWidget(BracketWidget("left", self), 0, 0, grid.rows, 1)
        self.labels: list[QLabel] = []
        for i, j in grid.iter_cells():
            label = QLabel(self)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setFont(diagram_font())
            label.setMinimumWidth(48)
            label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
            layout.addWidget(label, i, j + 1)
            self.labels.append(label)
        layout.addWidget(BracketWidget("right", self), 0, grid.columns + 1, grid.rows, 1)

        grid.add_listener(self._sync)
        self._sync(grid)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def label(self, row: int, column: int) -> QLabel:
        return self.labels[self.grid.cell_index(row, column)]

    def cell_at(self, pos: QPoint) -> tuple[int, int]:
        """Resolve a widget-local position to (row, column), or (-1, -1) outside every cell."""
        for i, j in self.grid.iter_cells():
            if self.label(i, j).geometry().contains(pos):
                return i, j
        return LEAVE

    def hover_at(self, pos: Optional[QPoint]) -> None:
        """Forward the cell under ``pos`` to the grid if it changed; None means the pointer left."""
        cell = LEAVE if pos is None else self.cell_at(pos)
        if cell == self._hovered:
            return
        self._hovered = cell
        self.grid.on_hover(*cell)

    def release(self) -> None:
        """Stop observing the grid (teardown)."""
        self.grid.remove_listener(self._sync)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self.hover_at(event.position().toPoint())
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self.hover_at(None)
        super().leaveEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        for state in self.grid.highlights():
            rect = self._highlight_rect(state)
            if rect is None:
                continue
            painter.setBrush(highlight_color(state.style))
            painter.drawRoundedRect(QRectF(rect), HIGHLIGHT_RADIUS, HIGHLIGHT_RADIUS)
        painter.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _highlight_rect(self, state: HighlightState) -> QRect | None:
        if not state.active:
            return None
        rect: QRect | None = None
        for i, j in self.grid.iter_cells():
            if state.covers(i, j):
                g = self.label(i, j).geometry().adjusted(-4, -4, 4, 4)
                rect = g if rect is None else rect.united(g)
        return rect

    def _sync(self, grid: GridView) -> None:
        for i, j in grid.iter_cells():
            cell = grid.cell(i, j)
            label = self.label(i, j)
            label.setText(cell.text)
            font = label.font()
            font.setBold(cell.selected)
            label.setFont(font)
        self.update()
