from __future__ import annotations

import pytest

from matrixdiagrams.diagrams.catalog import CATALOG, build_diagram, catalog_size
from matrixdiagrams.diagrams.registry import as_matrix, list_kinds, new_diagram
from matrixdiagrams.model.matrix import Matrix, ShapeError


def test_all_kinds_registered() -> None:
    assert set(list_kinds()) >= {"multiply", "transpose", "packing-row-major", "packing-column-major"}


def test_unknown_kind() -> None:
    with pytest.raises(KeyError):
        new_diagram("determinant", Matrix(2, 2))


def test_literal_operands() -> None:
    diagram = new_diagram("multiply", (1, 2, [1, 2]), (2, 1, [3, 4]))
    assert diagram.view_c.texts() == [["11"]]


def test_literal_with_wrong_length() -> None:
    with pytest.raises(ShapeError):
        as_matrix((2, 2, [1, 2, 3]))


def test_as_matrix_passes_matrices_through(a2: Matrix) -> None:
    assert as_matrix(a2) is a2


def test_catalog_has_eight_entries() -> None:
    assert catalog_size() == len(CATALOG) == 8


@pytest.mark.parametrize("index", range(8))
def test_every_entry_builds_wired(index: int) -> None:
    diagram = build_diagram(index)
    assert diagram.title == CATALOG[index].title
    assert diagram.kind == CATALOG[index].kind
    assert any(view._hover_callback is not None for view in diagram.views)
    diagram.teardown()
    assert all(view._hover_callback is None for view in diagram.views)


def test_catalog_shapes() -> None:
    square = build_diagram(0)
    assert square.view_a.texts() == [["1", "2"], ["3", "4"]]
    assert square.view_b.texts() == [["5", "6"], ["7", "8"]]

    rectangular = build_diagram(1)
    assert (rectangular.view_c.rows, rectangular.view_c.columns) == (2, 3)

    assert build_diagram(2).is_error
    assert (build_diagram(3).view_c.rows, build_diagram(3).view_c.columns) == (4, 1)
    assert (build_diagram(4).view_c.rows, build_diagram(4).view_c.columns) == (1, 4)


def test_out_of_range_entry() -> None:
    with pytest.raises(IndexError):
        build_diagram(8)
