from __future__ import annotations

import pytest

from matrixdiagrams.diagrams.base import COLUMN_STYLE, ROW_STYLE, FocusState
from matrixdiagrams.diagrams.registry import new_diagram
from matrixdiagrams.diagrams.transpose import TransposeDiagram
from matrixdiagrams.model.matrix import Matrix


@pytest.fixture()
def diagram() -> TransposeDiagram:
    return new_diagram("transpose", Matrix.sequence(3, 4))


def test_result_is_transpose(diagram: TransposeDiagram) -> None:
    assert diagram.view_t.rows == 4 and diagram.view_t.columns == 3
    assert diagram.view_t.texts()[0] == ["1", "5", "9"]
    assert not diagram.explanation.visible


def test_hover_source_mirrors_bands(diagram: TransposeDiagram) -> None:
    diagram.view_a.on_hover(1, 2)

    assert diagram.a.get(1, 2) == 7
    assert diagram.view_a.row_highlight.row == 1
    assert diagram.view_a.row_highlight.style == ROW_STYLE
    assert diagram.view_a.column_highlight.column == 2
    assert diagram.view_a.column_highlight.style == COLUMN_STYLE

    assert diagram.view_t.row_highlight.row == 2
    assert diagram.view_t.row_highlight.style == COLUMN_STYLE
    assert diagram.view_t.column_highlight.column == 1
    assert diagram.view_t.column_highlight.style == ROW_STYLE

    assert diagram.explanation.text == "A[1][2] = Aᵀ[2][1] = 7"
    assert diagram.explanation.visible


def test_hover_transposed_maps_back(diagram: TransposeDiagram) -> None:
    diagram.view_t.on_hover(2, 1)
    assert diagram.state == FocusState(1, 2)
    assert diagram.view_a.row_highlight.row == 1
    assert diagram.view_t.row_highlight.row == 2


def test_hovered_element_is_equal_in_both_grids(diagram: TransposeDiagram) -> None:
    for i, j in diagram.view_a.iter_cells():
        assert diagram.view_a.cell(i, j).text == diagram.view_t.cell(j, i).text


def test_leave_clears_both_grids(diagram: TransposeDiagram) -> None:
    diagram.view_a.on_hover(0, 0)
    diagram.view_t.on_hover(-1, -1)
    assert diagram.state == FocusState.idle()
    assert not diagram.explanation.visible
    for view in diagram.views:
        assert not any(h.active for h in view.highlights())
