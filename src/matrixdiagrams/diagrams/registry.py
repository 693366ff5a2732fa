"""
Diagram registry.

Each diagram module registers its constructor under a stable kind key:
``multiply``, ``transpose``, ``packing-row-major`` and ``packing-column-major``.
"""
from __future__ import annotations

import logging
from typing import Callable, Sequence, Union

from matrixdiagrams.diagrams.base import Diagram
from matrixdiagrams.model.matrix import Matrix, ShapeError

logger = logging.getLogger(__name__)

DiagramFactory = Callable[..., Diagram]

# A matrix literal: (rows, columns, row-major values).
MatrixLiteral = tuple[int, int, Sequence[float]]
Operand = Union[Matrix, MatrixLiteral]

_REGISTRY: dict[str, DiagramFactory] = {}


def register_diagram(kind: str) -> Callable[[DiagramFactory], DiagramFactory]:
    """Decorator registering a diagram class or factory function under ``kind``."""
    def decorator(factory: DiagramFactory) -> DiagramFactory:
        if not kind:
            raise ValueError(f"{factory.__name__} must be registered with a kind")
        _REGISTRY[kind] = factory
        return factory
    return decorator


def as_matrix(operand: Operand) -> Matrix:
    if isinstance(operand, Matrix):
        return operand
    try:
        rows, columns, values = operand
    except (TypeError, ValueError) as e:
        raise ShapeError(f"Operand must be a Matrix or (rows, columns, values), got {operand!r}") from e
    values = list(values)
    if len(values) != rows * columns:
        raise ShapeError(f"Matrix literal {rows}x{columns} needs {rows * columns} values, got {len(values)}.")
    return Matrix(rows, columns, values)


def new_diagram(kind: str, *operands: Operand) -> Diagram:
    """Construct a diagram of ``kind`` and wire its hover callbacks."""
    factory = _REGISTRY.get(kind)
    if factory is None:
        raise KeyError(f"No diagram registered for kind '{kind}'")
    diagram = factory(*(as_matrix(op) for op in operands))
    diagram.wire_hover()
    logger.debug(f"Built {kind} diagram '{diagram.title}'")
    return diagram


def list_kinds() -> list[str]:
    return list(_REGISTRY.keys())
