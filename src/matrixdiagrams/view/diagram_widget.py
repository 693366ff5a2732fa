"""
Diagram Widgets
===============
Lays out one linked diagram: its grids, the operator glyphs between them and
the explanation line below.

    multiply:   A  ×  B  =  C
    transpose:  Aᵀ =  B
    packing:    float m[] = {...}  =  M
"""
from __future__ import annotations

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QPainter, QPaintEvent, QFontMetricsF
from PySide6.QtWidgets import QWidget, QGridLayout, QLabel, QSizePolicy

from matrixdiagrams.config import ERROR_COLOR, FOREGROUND_COLOR, HIGHLIGHT_RADIUS
from matrixdiagrams.diagrams.base import COLUMN_STYLE, ROW_STYLE, Diagram
from matrixdiagrams.diagrams.packing import PackingDiagram, PackingOrder
from matrixdiagrams.view.grid_widget import MatrixGridWidget
from matrixdiagrams.view.style import diagram_font, highlight_color, qcolor


def text_label(text: str, scale: float = 1.5, parent: QWidget | None = None) -> QLabel:
    label = QLabel(text, parent)
    label.setFont(diagram_font(scale))
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return label


class LiteralWidget(QWidget):
    """
    Monospace source literal of a packing diagram with the active group's runs
    highlighted.
    """
    def __init__(self, diagram: PackingDiagram, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.diagram = diagram
        self.setFont(diagram_font(1.1))
        self.style_key = ROW_STYLE if diagram.order is PackingOrder.ROW_MAJOR else COLUMN_STYLE
        metrics = QFontMetricsF(self.font())
        self._char_width = metrics.horizontalAdvance("0")
        self._line_height = metrics.lineSpacing() * 1.5
        width = max(len(line) for line in diagram.literal_lines) * self._char_width
        self.setMinimumSize(int(width) + 48, int(self._line_height * len(diagram.literal_lines)) + 24)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def run_rect(self, line: int, start: int, length: int) -> QRectF:
        return QRectF(
            12 + start * self._char_width - 3,
            12 + line * self._line_height,
            length * self._char_width + 6,
            self._line_height,
        )

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(highlight_color(self.style_key))
        for run in self.diagram.runs_for(self.diagram.active_group):
            painter.drawRoundedRect(self.run_rect(run.line, run.start, run.length), HIGHLIGHT_RADIUS / 2, HIGHLIGHT_RADIUS / 2)

        painter.setPen(qcolor(FOREGROUND_COLOR))
        painter.setFont(self.font())
        for n, line in enumerate(self.diagram.literal_lines):
            painter.drawText(self.run_rect(n, 0, len(line)), Qt.AlignmentFlag.AlignVCenter, line)
        painter.end()


class DiagramWidget(QWidget):
    """Mountable view of one diagram. Owns the grid widgets, not the diagram."""
    def __init__(self, diagram: Diagram, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.diagram = diagram
        self.grid_widgets: list[MatrixGridWidget] = []
        self.literal: LiteralWidget | None = None

        layout = QGridLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        match diagram.kind:
            case "multiply":
                parts: list[QWidget] = [
                    self._grid(diagram.views[0]), text_label("×"),
                    self._grid(diagram.views[1]), text_label("="),
                    self._grid(diagram.views[2]),
                ]
            case "transpose":
                source = self._grid(diagram.views[0])
                superscript = text_label("T", 1.2, source)
                font = superscript.font()
                font.setItalic(True)
                superscript.setFont(font)
                superscript.move(source.sizeHint().width() - 20, 0)
                parts = [source, text_label("="), self._grid(diagram.views[1])]
            case _:
                self.literal = LiteralWidget(diagram, self)
                parts = [self.literal, text_label("="), self._grid(diagram.views[0])]

        for column, part in enumerate(parts):
            layout.addWidget(part, 0, column, Qt.AlignmentFlag.AlignCenter)

        self.explanation_label = QLabel(self)
        self.explanation_label.setFont(diagram_font())
        self.explanation_label.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)
        policy = self.explanation_label.sizePolicy()
        policy.setRetainSizeWhenHidden(True)
        self.explanation_label.setSizePolicy(policy)
        layout.addWidget(self.explanation_label, 1, 0, 1, len(parts))

        diagram.add_listener(self._sync)
        self._sync(diagram)

    def _grid(self, view) -> MatrixGridWidget:
        widget = MatrixGridWidget(view, self)
        self.grid_widgets.append(widget)
        return widget

    def _sync(self, diagram: Diagram) -> None:
        explanation = diagram.explanation
        color = ERROR_COLOR if explanation.is_error else FOREGROUND_COLOR
        self.explanation_label.setStyleSheet(f"color: {color};")
        self.explanation_label.setText(explanation.text)
        self.explanation_label.setVisible(explanation.visible)
        if self.literal is not None:
            self.literal.update()

    def release(self) -> None:
        """Stop observing the model; called before the widget is deleted."""
        for widget in self.grid_widgets:
            widget.release()
