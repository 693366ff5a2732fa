from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout

from matrixdiagrams.diagrams.base import Diagram
from matrixdiagrams.diagrams.catalog import build_diagram, catalog_size
from matrixdiagrams.view.diagram_widget import DiagramWidget

logger = logging.getLogger(__name__)


class DiagramHost(QObject):
    """
    Holds at most one mounted diagram.

    Mounting a new diagram first tears down the previous one: hover callbacks
    and listeners are detached and its widget is deleted, then the next
    diagram is built and placed into ``container``.
    """
    diagram_changed = Signal(int)

    def __init__(
        self,
        container: QWidget,
        factory: Callable[[int], Diagram] = build_diagram,
        count: int | None = None,
    ) -> None:
        super().__init__(container)
        self.container = container
        self.factory = factory
        self.count = catalog_size() if count is None else count
        self.index: int = -1
        self.diagram: Optional[Diagram] = None
        self.widget: Optional[DiagramWidget] = None

        self._layout = container.layout() or QVBoxLayout(container)

    def mount(self, index: int) -> Diagram:
        if not 0 <= index < self.count:
            raise IndexError(f"Diagram index {index} out of range (1..{self.count}).")
        self.unmount()

        diagram = self.factory(index)
        self.diagram = diagram
        self.widget = DiagramWidget(diagram, self.container)
        self._layout.addWidget(self.widget)
        self.index = index
        logger.info(f"Mounted diagram {index + 1}: {diagram.title}")
        self.diagram_changed.emit(index)
        return diagram

    def unmount(self) -> None:
        if self.diagram is None:
            return
        self.diagram.teardown()
        if self.widget is not None:
            self.widget.release()
            self._layout.removeWidget(self.widget)
            self.widget.setParent(None)
            self.widget.deleteLater()
        logger.debug(f"Unmounted diagram {self.index + 1}")
        self.diagram = None
        self.widget = None
        self.index = -1
