"""
Packing-order diagram: a flat C-style array literal next to the matrix it encodes.

Row-major packing stores each row as one contiguous run of the literal;
column-major packing stores each column as one run. Hovering a row (row-major)
or a column (column-major) of the matrix highlights the run of literal values
that hold it. A run may wrap over a line break of the literal, in which case it
is split into several ``LiteralRun`` spans with the same group.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from matrixdiagrams.diagrams.base import (
    COLUMN_STYLE, ROW_STYLE, DiagramListener, Explanation, FocusState, Listeners, detach_views,
)
from matrixdiagrams.diagrams.registry import register_diagram
from matrixdiagrams.model.grid import GridView
from matrixdiagrams.model.matrix import Matrix, format_value

logger = logging.getLogger(__name__)

LITERAL_INDENT = "    "
# Literal lines before the first value line.
LITERAL_HEADER_LINES = 2


class PackingOrder(Enum):
    ROW_MAJOR = "row-major"
    COLUMN_MAJOR = "column-major"


@dataclass(frozen=True)
class LiteralRun:
    """Character span ``[start, start + length)`` on literal line ``line`` belonging to ``group``."""
    group: int
    line: int
    start: int
    length: int


def literal_layout(values: list[str], per_line: int, group_of: list[int]) -> tuple[list[str], list[LiteralRun]]:
    """
    Lay out value tokens as ``    1, 2, 3, 4,`` lines and compute the
    highlight spans of each group. Each token span includes its trailing comma.
    """
    lines: list[str] = []
    runs: list[LiteralRun] = []
    for line_start in range(0, len(values), per_line):
        line_no = LITERAL_HEADER_LINES + len(lines)
        text = LITERAL_INDENT
        current: LiteralRun | None = None
        for k in range(line_start, min(line_start + per_line, len(values))):
            if k > line_start:
                text += " "
            start = len(text)
            text += f"{values[k]},"
            if current is not None and current.group == group_of[k]:
                current = LiteralRun(current.group, line_no, current.start, len(text) - current.start)
            else:
                if current is not None:
                    runs.append(current)
                current = LiteralRun(group_of[k], line_no, start, len(text) - start)
        if current is not None:
            runs.append(current)
        lines.append(text)
    return lines, runs


class PackingDiagram:
    """
    ``matrix`` is the flat buffer as written in the literal.

    For row-major packing it is shown as is. For column-major packing the
    buffer is read as the transpose, so consecutive literal values fill a column.
    """

    def __init__(self, matrix: Matrix, order: PackingOrder, title: str = "") -> None:
        self.source = matrix
        self.order = order
        self.kind = f"packing-{order.value}"
        self.title = title or f"{order.value} packing"
        self.state = FocusState.idle()
        self.explanation = Explanation()
        self.active_group = -1
        self._listeners = Listeners()

        shown = matrix if order is PackingOrder.ROW_MAJOR else matrix.transpose()
        self.view = GridView(shown, "M")
        self.views = [self.view]

        tokens = [format_value(v) for v in matrix]
        group_of = [self._group_of_offset(k) for k in range(len(tokens))]
        value_lines, self.literal_runs = literal_layout(tokens, shown.columns, group_of)
        self.literal_lines = [f"// {order.value} packing", "float m[] = {", *value_lines, "};"]

    @property
    def group_count(self) -> int:
        if self.order is PackingOrder.ROW_MAJOR:
            return self.view.rows
        return self.view.columns

    def _group_length(self) -> int:
        if self.order is PackingOrder.ROW_MAJOR:
            return self.view.columns
        return self.view.rows

    def _group_of_offset(self, k: int) -> int:
        return k // self._group_length()

    def runs_for(self, group: int) -> list[LiteralRun]:
        return [r for r in self.literal_runs if r.group == group]

    @property
    def literal_text(self) -> str:
        return "\n".join(self.literal_lines)

    def wire_hover(self) -> None:
        self.view.register_hover_callback(self.select)

    def select(self, row: int, column: int) -> None:
        """Highlight the row or column under the pointer and its literal run."""
        if row < 0 or column < 0:
            self.state = FocusState.idle()
            group = -1
        else:
            self.state = FocusState(row, column)
            group = row if self.order is PackingOrder.ROW_MAJOR else column

        self.active_group = group
        if self.order is PackingOrder.ROW_MAJOR:
            self.view.set_row_highlight(group, ROW_STYLE)
        else:
            self.view.set_column_highlight(group, COLUMN_STYLE)

        if group < 0:
            self.explanation.visible = False
        else:
            first = group * self._group_length()
            last = first + self._group_length() - 1
            axis = "row" if self.order is PackingOrder.ROW_MAJOR else "column"
            self.explanation.text = f"{axis} {group} = m[{first}] .. m[{last}]"
            self.explanation.visible = True

        self._listeners.emit(self)

    def add_listener(self, listener: DiagramListener) -> None:
        self._listeners.add(listener)

    def teardown(self) -> None:
        detach_views(self.views)
        self._listeners.clear()
        self.state = FocusState.idle()
        self.active_group = -1


@register_diagram("packing-row-major")
def row_major_packing(matrix: Matrix) -> PackingDiagram:
    return PackingDiagram(matrix, PackingOrder.ROW_MAJOR)


@register_diagram("packing-column-major")
def column_major_packing(matrix: Matrix) -> PackingDiagram:
    return PackingDiagram(matrix, PackingOrder.COLUMN_MAJOR)
