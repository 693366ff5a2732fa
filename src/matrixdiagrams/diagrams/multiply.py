"""
Matrix Multiplication Diagram
=============================
Three linked grids: ``A × B = C``.

Hovering C at (i, j) selects row i of A, column j of B and cell (i, j) of C,
and writes out the dot product that produced the cell, e.g.
``(1 × 6) + (2 × 8) = 22``. Hovering A selects a row (column 0 of B), hovering
B selects a column (row 0 of A).

If ``A.columns != B.rows`` no product exists. The result area then shows
placeholder cells and a permanent error line naming both shapes; hovering A
or B only highlights the operand itself.
"""
from __future__ import annotations

import logging

from matrixdiagrams.config import PLACEHOLDER_TEXT
from matrixdiagrams.diagrams.base import (
    CELL_STYLE, COLUMN_STYLE, ROW_STYLE, DiagramListener, Explanation, FocusState, Listeners, detach_views,
)
from matrixdiagrams.diagrams.registry import register_diagram
from matrixdiagrams.model.grid import GridView
from matrixdiagrams.model.matrix import Matrix, format_value

logger = logging.getLogger(__name__)

# Shape of the placeholder result grid shown for incompatible operands.
ERROR_RESULT_SHAPE = (2, 2)


def dot_product_terms(a: Matrix, b: Matrix, row: int, column: int) -> list[str]:
    """Written-out products ``(a_k × b_k)`` of A's row and B's column."""
    a_v = a.get_row(row)
    b_v = b.get_column(column)
    return [f"({format_value(x)} × {format_value(y)})" for x, y in zip(a_v, b_v)]


def dot_product_text(a: Matrix, b: Matrix, c: Matrix, row: int, column: int) -> str:
    terms = dot_product_terms(a, b, row, column)
    return f"{' + '.join(terms)} = {format_value(c.get(row, column))}"


def incompatible_text(a: Matrix, b: Matrix) -> str:
    return f"Error: Cannot multiply {a.shape_text()} matrix with {b.shape_text()} matrix"


@register_diagram("multiply")
class MultiplyDiagram:
    kind = "multiply"

    def __init__(self, a: Matrix, b: Matrix, title: str = "") -> None:
        self.a = a
        self.b = b
        self.title = title or f"{a.shape_text()} × {b.shape_text()}"
        self.state = FocusState.idle()
        self._listeners = Listeners()

        self.view_a = GridView(a, "A")
        self.view_b = GridView(b, "B")

        if a.can_multiply(b):
            self.result: Matrix | None = a.multiply(b)
            self.view_c = GridView(self.result, "C")
            # Idle still shows the worked (0, 0) term.
            self.explanation = Explanation(text=self.explain(0, 0), visible=True)
        else:
            self.result = None
            self.view_c = GridView(Matrix(*ERROR_RESULT_SHAPE), "C")
            self.view_c.set_placeholder(PLACEHOLDER_TEXT)
            self.explanation = Explanation(text=incompatible_text(a, b), visible=True, is_error=True)
            logger.warning(self.explanation.text)

        self.views = [self.view_a, self.view_b, self.view_c]

    @property
    def is_error(self) -> bool:
        return self.result is None

    def explain(self, row: int, column: int) -> str:
        if self.result is None:
            return incompatible_text(self.a, self.b)
        return dot_product_text(self.a, self.b, self.result, row, column)

    # ------------------------------------------------------------------------------
    # Hover wiring
    # ------------------------------------------------------------------------------

    def wire_hover(self) -> None:
        if self.result is None:
            self.view_a.register_hover_callback(lambda i, j: self.view_a.set_row_highlight(i, ROW_STYLE))
            self.view_b.register_hover_callback(lambda i, j: self.view_b.set_column_highlight(j, COLUMN_STYLE))
            return

        self.view_a.register_hover_callback(lambda i, j: self.select(i, 0 if i >= 0 else -1))
        self.view_b.register_hover_callback(lambda i, j: self.select(0 if j >= 0 else -1, j))
        self.view_c.register_hover_callback(self.select)

    def select(self, row: int, column: int) -> None:
        """Focus result cell (row, column) across all three grids; negative means leave."""
        if self.result is None:
            raise RuntimeError("Incompatible multiplication has no result cell to select.")

        if row < 0 or column < 0:
            self.state = FocusState.idle()
            for view in self.views:
                view.clear_highlights()
            self.explanation.visible = False
        else:
            self.state = FocusState(row, column)
            self.view_a.set_row_highlight(row, ROW_STYLE)
            self.view_b.set_column_highlight(column, COLUMN_STYLE)
            self.view_c.set_cell_highlight(row, column, CELL_STYLE)
            self.explanation.text = self.explain(row, column)
            self.explanation.visible = True
            logger.debug(f"Focused {self.title} at ({row}, {column})")
        self._listeners.emit(self)

    def add_listener(self, listener: DiagramListener) -> None:
        self._listeners.add(listener)

    def teardown(self) -> None:
        detach_views(self.views)
        self._listeners.clear()
        self.state = FocusState.idle()
