"""
Main Application Window
=======================
The shell around the diagrams: a dark full-window frame showing exactly one
catalog diagram at a time.

Why is this file needed?
------------------------
1. Routing: It turns the external selection (command line / ``#N`` fragment)
   and digit key presses into "show diagram N".
2. Ownership: Through ``DiagramHost`` it guarantees the previous diagram is
   torn down before the next one is mounted.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from matrixdiagrams.app.state import DiagramHost
from matrixdiagrams.config import BACKGROUND_COLOR, FOREGROUND_COLOR, VISIBLE_APP_NAME
from matrixdiagrams.model.selection import SelectionRouter

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, selection: Optional[str] = None, host: DiagramHost | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        central = QWidget(self)
        central.setObjectName("diagramFrame")
        central.setStyleSheet(
            f"#diagramFrame {{ background-color: {BACKGROUND_COLOR}; }}"
            f" QLabel {{ color: {FOREGROUND_COLOR}; }}"
        )
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(central)

        self.host = host or DiagramHost(central)
        self.router = SelectionRouter(self.host.count)
        self.host.diagram_changed.connect(self._on_diagram_changed)

        self.set_fragment(selection)

    def set_fragment(self, text: Optional[str]) -> None:
        """Show the diagram named by an external selection such as ``"3"`` or ``"#3"``."""
        self.host.mount(self.router.route(text))

    def keyPressEvent(self, event: QKeyEvent) -> None:
        index = self.router.key_pressed(event.text())
        if index is None:
            super().keyPressEvent(event)
            return
        self.host.mount(index)
        event.accept()

    def _on_diagram_changed(self, index: int) -> None:
        title = self.host.diagram.title if self.host.diagram is not None else ""
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - {index + 1}. {title}")
