"""
Built-in diagram catalog, in display order (diagram 1 is index 0).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from matrixdiagrams.diagrams.base import Diagram
from matrixdiagrams.diagrams.registry import new_diagram
from matrixdiagrams.model.matrix import Matrix


@dataclass(frozen=True)
class CatalogEntry:
    title: str
    kind: str
    operands: Callable[[], tuple[Matrix, ...]]

    def build(self) -> Diagram:
        diagram = new_diagram(self.kind, *self.operands())
        diagram.title = self.title
        return diagram


def _square_product() -> tuple[Matrix, ...]:
    a = Matrix.sequence(2, 2)
    return a, Matrix.sequence(2, 2, start=a.size + 1)


def _rectangular_product() -> tuple[Matrix, ...]:
    a = Matrix.sequence(2, 4)
    return a, Matrix.sequence(4, 3, start=a.size + 1)


def _incompatible_product() -> tuple[Matrix, ...]:
    a = Matrix.sequence(4, 2)
    return a, Matrix.sequence(3, 4, start=a.size + 1)


def _matrix_times_vector() -> tuple[Matrix, ...]:
    return Matrix.sequence(4, 4), Matrix.sequence(4, 1)


def _vector_times_matrix() -> tuple[Matrix, ...]:
    return Matrix.sequence(1, 4), Matrix.sequence(4, 4).transpose()


CATALOG: list[CatalogEntry] = [
    CatalogEntry("Matrix multiplication", "multiply", _square_product),
    CatalogEntry("Rectangular matrix multiplication", "multiply", _rectangular_product),
    CatalogEntry("Incompatible shapes", "multiply", _incompatible_product),
    CatalogEntry("Matrix times column vector", "multiply", _matrix_times_vector),
    CatalogEntry("Row vector times matrix", "multiply", _vector_times_matrix),
    CatalogEntry("Transpose", "transpose", lambda: (Matrix.sequence(3, 4),)),
    CatalogEntry("Row-major packing", "packing-row-major", lambda: (Matrix.sequence(3, 4),)),
    CatalogEntry("Column-major packing", "packing-column-major", lambda: (Matrix.sequence(4, 3),)),
]


def catalog_size() -> int:
    return len(CATALOG)


def build_diagram(index: int) -> Diagram:
    """Build catalog entry ``index`` (0-based)."""
    return CATALOG[index].build()
