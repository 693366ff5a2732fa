"""
Grid View State
===============
Display state of one matrix grid: per-cell text, three independent highlight
channels (row band, column band, single cell) and the hover notification path.

Why is this file needed?
------------------------
1. Decoupling: Diagrams wire highlights across grids without knowing anything
   about Qt. The widget in ``view/grid_widget.py`` only observes this object.
2. Offset law: Cell handles are stored row-major, so ``cell_index(r, c)`` equals
   ``Matrix.offset(r, c)`` for the observed matrix.

Note: This module should NOT import PySide6.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional

from matrixdiagrams.model.matrix import Matrix, format_value

logger = logging.getLogger(__name__)

HoverCallback = Callable[[int, int], None]
GridListener = Callable[["GridView"], None]

# Coordinates reported when the pointer leaves the grid.
LEAVE = (-1, -1)


class HighlightKind(Enum):
    NONE = "none"
    ROW = "row"
    COLUMN = "column"
    CELL = "cell"


@dataclass(frozen=True)
class HighlightState:
    """One highlight channel. ``style`` is a colour key resolved by the view layer."""
    kind: HighlightKind = HighlightKind.NONE
    row: int = -1
    column: int = -1
    style: str = ""

    @classmethod
    def inactive(cls) -> HighlightState:
        return cls()

    @property
    def active(self) -> bool:
        return self.kind is not HighlightKind.NONE

    def covers(self, row: int, column: int) -> bool:
        """True if the highlighted band or cell contains (row, column)."""
        if self.kind is HighlightKind.ROW:
            return row == self.row
        if self.kind is HighlightKind.COLUMN:
            return column == self.column
        if self.kind is HighlightKind.CELL:
            return row == self.row and column == self.column
        return False


@dataclass
class Cell:
    """Display handle of one matrix element."""
    text: str = ""
    selected: bool = False


class GridView:
    """
    Observable display state for one Matrix.

    The matrix is only read. ``refresh()`` re-reads every element; highlights
    never touch the data.
    """

    def __init__(self, matrix: Matrix, name: str = "") -> None:
        self.matrix = matrix
        self.name = name or matrix.shape_text()
        self.cells: list[Cell] = [Cell() for _ in range(matrix.size)]

        self.row_highlight = HighlightState.inactive()
        self.column_highlight = HighlightState.inactive()
        self.cell_highlight = HighlightState.inactive()

        self._hover_callback: Optional[HoverCallback] = None
        self._listeners: list[GridListener] = []

        self.refresh()

    # ------------------------------------------------------------------------------
    # Shape & cells
    # ------------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.matrix.rows

    @property
    def columns(self) -> int:
        return self.matrix.columns

    def cell_index(self, row: int, column: int) -> int:
        return self.matrix.offset(row, column)

    def cell(self, row: int, column: int) -> Cell:
        return self.cells[self.cell_index(row, column)]

    def iter_cells(self) -> Iterator[tuple[int, int]]:
        for i in range(self.rows):
            for j in range(self.columns):
                yield i, j

    def texts(self) -> list[list[str]]:
        return [[self.cell(i, j).text for j in range(self.columns)] for i in range(self.rows)]

    def refresh(self) -> None:
        for i, j in self.iter_cells():
            self.cell(i, j).text = format_value(self.matrix.get(i, j))
        self._notify()

    def set_placeholder(self, text: str) -> None:
        """Show ``text`` in every cell instead of the matrix values."""
        for c in self.cells:
            c.text = text
        self._notify()

    # ------------------------------------------------------------------------------
    # Highlight channels
    # ------------------------------------------------------------------------------

    def set_row_highlight(self, row: int, style: str = "row") -> None:
        if row < 0:
            self.row_highlight = HighlightState.inactive()
        else:
            self.matrix.check_row(row)
            self.row_highlight = HighlightState(HighlightKind.ROW, row=row, style=style)
        self._select(lambda i, j: i == row)

    def set_column_highlight(self, column: int, style: str = "column") -> None:
        if column < 0:
            self.column_highlight = HighlightState.inactive()
        else:
            self.matrix.check_column(column)
            self.column_highlight = HighlightState(HighlightKind.COLUMN, column=column, style=style)
        self._select(lambda i, j: j == column)

    def set_cell_highlight(self, row: int, column: int, style: str = "cell") -> None:
        if row < 0 or column < 0:
            self.cell_highlight = HighlightState.inactive()
        else:
            self.matrix.offset(row, column)
            self.cell_highlight = HighlightState(HighlightKind.CELL, row=row, column=column, style=style)
        self._select(lambda i, j: i == row and j == column)

    def clear_highlights(self) -> None:
        self.row_highlight = HighlightState.inactive()
        self.column_highlight = HighlightState.inactive()
        self.cell_highlight = HighlightState.inactive()
        self._select(lambda i, j: False)

    def highlights(self) -> tuple[HighlightState, HighlightState, HighlightState]:
        return self.row_highlight, self.column_highlight, self.cell_highlight

    def selected_cells(self) -> list[tuple[int, int]]:
        return [(i, j) for i, j in self.iter_cells() if self.cell(i, j).selected]

    def _select(self, predicate: Callable[[int, int], bool]) -> None:
        # The channel that was set last decides the emphasised cells.
        for i, j in self.iter_cells():
            self.cell(i, j).selected = predicate(i, j)
        self._notify()

    # ------------------------------------------------------------------------------
    # Hover & listeners
    # ------------------------------------------------------------------------------

    def register_hover_callback(self, callback: HoverCallback) -> None:
        """Set the single hover callback; replaces any previous one."""
        self._hover_callback = callback

    def clear_hover_callback(self) -> None:
        self._hover_callback = None

    def on_hover(self, row: int, column: int) -> None:
        """
        Called by the interaction surface with a resolved cell, or with a
        negative row when the pointer left the grid.
        """
        if row < 0:
            row, column = LEAVE
        logger.debug(f"Hover on {self.name}: ({row}, {column})")
        if self._hover_callback is not None:
            self._hover_callback(row, column)

    def add_listener(self, listener: GridListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GridListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def detach(self) -> None:
        """Drop the hover callback and every listener (diagram teardown)."""
        self._hover_callback = None
        self._listeners.clear()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
