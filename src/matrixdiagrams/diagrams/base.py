"""
Common capability interface of all linked diagrams.

Concrete diagrams (multiply, transpose, packing) do not share a base class;
they satisfy the ``Diagram`` protocol and compose the small helpers below.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from matrixdiagrams.model.grid import GridView

# Highlight style keys, resolved to colours by the view layer (see config.HIGHLIGHT_COLORS).
ROW_STYLE = "row"
COLUMN_STYLE = "column"
CELL_STYLE = "cell"


@dataclass(frozen=True)
class FocusState:
    """``idle`` when no cell is hovered, otherwise ``focused(row, column)``."""
    row: int = -1
    column: int = -1

    @classmethod
    def idle(cls) -> FocusState:
        return cls()

    @property
    def focused(self) -> bool:
        return self.row >= 0 and self.column >= 0


@dataclass
class Explanation:
    """Text shown below the diagram."""
    text: str = ""
    visible: bool = False
    is_error: bool = False


DiagramListener = Callable[["Diagram"], None]


class Listeners:
    """Ordered list of change callbacks."""

    def __init__(self) -> None:
        self._items: list[Callable] = []

    def add(self, listener: Callable) -> None:
        self._items.append(listener)

    def clear(self) -> None:
        self._items.clear()

    def emit(self, *args) -> None:
        for listener in list(self._items):
            listener(*args)

    def __len__(self) -> int:
        return len(self._items)


class Diagram(Protocol):
    kind: str
    title: str
    views: list[GridView]
    explanation: Explanation
    state: FocusState

    def wire_hover(self) -> None:
        """Register hover callbacks on every participating view."""
        ...

    def teardown(self) -> None:
        """Detach hover callbacks and listeners; the diagram is dead afterwards."""
        ...

    def add_listener(self, listener: DiagramListener) -> None:
        """Called with the diagram whenever its focus or explanation changes."""
        ...


def detach_views(views: list[GridView]) -> None:
    for view in views:
        view.clear_highlights()
        view.detach()
