"""
Transpose diagram: ``A`` next to ``Aᵀ``.

Hovering A at (i, j) bands row i and column j of A, and, with the roles of the
axes swapped, column i and row j of Aᵀ. Both bands keep their colour across the
two grids: A's row colour marks Aᵀ's column and vice versa.
"""
from __future__ import annotations

import logging

from matrixdiagrams.diagrams.base import (
    COLUMN_STYLE, ROW_STYLE, DiagramListener, Explanation, FocusState, Listeners, detach_views,
)
from matrixdiagrams.diagrams.registry import register_diagram
from matrixdiagrams.model.grid import GridView
from matrixdiagrams.model.matrix import Matrix, format_value

logger = logging.getLogger(__name__)


@register_diagram("transpose")
class TransposeDiagram:
    kind = "transpose"

    def __init__(self, a: Matrix, title: str = "") -> None:
        self.a = a
        self.result = a.transpose()
        self.title = title or f"{a.shape_text()} transposed"
        self.state = FocusState.idle()
        self.explanation = Explanation()
        self._listeners = Listeners()

        self.view_a = GridView(a, "A")
        self.view_t = GridView(self.result, "Aᵀ")
        self.views = [self.view_a, self.view_t]

    def wire_hover(self) -> None:
        self.view_a.register_hover_callback(self.select)
        # Aᵀ reports its own coordinates; map them back onto A.
        self.view_t.register_hover_callback(lambda i, j: self.select(j, i))

    def select(self, row: int, column: int) -> None:
        """Focus element (row, column) of A and the mirrored element of Aᵀ."""
        if row < 0 or column < 0:
            row, column = -1, -1
            self.state = FocusState.idle()
            self.explanation.visible = False
        else:
            self.state = FocusState(row, column)
            self.explanation.text = (
                f"A[{row}][{column}] = Aᵀ[{column}][{row}] = {format_value(self.a.get(row, column))}"
            )
            self.explanation.visible = True

        self.view_a.set_row_highlight(row, ROW_STYLE)
        self.view_a.set_column_highlight(column, COLUMN_STYLE)

        self.view_t.set_column_highlight(row, ROW_STYLE)
        self.view_t.set_row_highlight(column, COLUMN_STYLE)

        self._listeners.emit(self)

    def add_listener(self, listener: DiagramListener) -> None:
        self._listeners.add(listener)

    def teardown(self) -> None:
        detach_views(self.views)
        self._listeners.clear()
        self.state = FocusState.idle()
