from __future__ import annotations

import os

import pytest

from matrixdiagrams.model.matrix import Matrix


@pytest.fixture()
def a2() -> Matrix:
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture()
def b2() -> Matrix:
    return Matrix.from_rows([[5, 6], [7, 8]])


@pytest.fixture(scope="session")
def qapp():
    pytest.importorskip("PySide6.QtWidgets")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from matrixdiagrams.app.application import create_app

    return create_app(["matrixdiagrams-tests"])
