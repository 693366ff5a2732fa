from __future__ import annotations

import os
import sys
from typing import Sequence

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from matrixdiagrams.config import APP_ID, ORG_ID, VISIBLE_APP_NAME
from matrixdiagrams.view.style import diagram_font


def create_app(argv: Sequence[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    app.setFont(diagram_font())
    return app
