from __future__ import annotations

import pytest

from matrixdiagrams.model.grid import GridView, HighlightKind, HighlightState
from matrixdiagrams.model.matrix import Matrix


@pytest.fixture()
def grid() -> GridView:
    return GridView(Matrix.sequence(3, 4))


def test_cells_follow_matrix_offset_law(grid: GridView) -> None:
    assert len(grid.cells) == 12
    for r, c in grid.iter_cells():
        assert grid.cell_index(r, c) == r * grid.columns + c == grid.matrix.offset(r, c)
        assert grid.cells[r * grid.columns + c].text == str(int(grid.matrix.get(r, c)))


def test_initial_channels_inactive(grid: GridView) -> None:
    assert all(not h.active for h in grid.highlights())
    assert grid.selected_cells() == []


def test_refresh_rereads_matrix(grid: GridView) -> None:
    grid.matrix.set(2, 3, 0.5)
    assert grid.cell(2, 3).text == "12"
    grid.refresh()
    assert grid.cell(2, 3).text == "0.5"


def test_placeholder_then_refresh(grid: GridView) -> None:
    grid.set_placeholder("…")
    assert {c.text for c in grid.cells} == {"…"}
    grid.refresh()
    assert grid.texts()[0] == ["1", "2", "3", "4"]


def test_row_highlight_selects_row(grid: GridView) -> None:
    grid.set_row_highlight(1, "row")
    assert grid.row_highlight == HighlightState(HighlightKind.ROW, row=1, style="row")
    assert grid.selected_cells() == [(1, 0), (1, 1), (1, 2), (1, 3)]

    grid.set_row_highlight(2, "row")
    assert grid.row_highlight.row == 2
    assert grid.selected_cells() == [(2, 0), (2, 1), (2, 2), (2, 3)]


def test_negative_row_clears_channel(grid: GridView) -> None:
    grid.set_row_highlight(0)
    grid.set_row_highlight(-1)
    assert not grid.row_highlight.active
    assert grid.selected_cells() == []


def test_column_and_cell_channels(grid: GridView) -> None:
    grid.set_column_highlight(2, "column")
    assert grid.column_highlight.kind is HighlightKind.COLUMN
    assert grid.selected_cells() == [(0, 2), (1, 2), (2, 2)]

    grid.set_cell_highlight(1, 3, "cell")
    assert grid.cell_highlight.covers(1, 3)
    assert not grid.cell_highlight.covers(1, 2)
    assert grid.selected_cells() == [(1, 3)]


def test_channels_are_independent(grid: GridView) -> None:
    grid.set_row_highlight(0)
    grid.set_column_highlight(1)
    grid.set_cell_highlight(2, 2)
    assert grid.row_highlight.row == 0
    assert grid.column_highlight.column == 1
    assert (grid.cell_highlight.row, grid.cell_highlight.column) == (2, 2)

    grid.set_column_highlight(-1)
    assert grid.row_highlight.active and grid.cell_highlight.active


def test_highlight_out_of_range(grid: GridView) -> None:
    with pytest.raises(IndexError):
        grid.set_row_highlight(3)
    with pytest.raises(IndexError):
        grid.set_column_highlight(4)
    with pytest.raises(IndexError):
        grid.set_cell_highlight(0, 4)


def test_clear_highlights(grid: GridView) -> None:
    grid.set_row_highlight(0)
    grid.set_cell_highlight(1, 1)
    grid.clear_highlights()
    assert all(not h.active for h in grid.highlights())
    assert grid.selected_cells() == []


def test_hover_forwards_cell_and_leave(grid: GridView) -> None:
    calls: list[tuple[int, int]] = []
    grid.register_hover_callback(lambda r, c: calls.append((r, c)))
    grid.on_hover(1, 2)
    grid.on_hover(-1, 5)
    assert calls == [(1, 2), (-1, -1)]


def test_hover_callback_is_single_slot(grid: GridView) -> None:
    first: list[tuple[int, int]] = []
    second: list[tuple[int, int]] = []
    grid.register_hover_callback(lambda r, c: first.append((r, c)))
    grid.register_hover_callback(lambda r, c: second.append((r, c)))
    grid.on_hover(0, 0)
    assert first == [] and second == [(0, 0)]


def test_hover_without_callback_is_noop(grid: GridView) -> None:
    grid.on_hover(0, 0)


def test_listeners_and_detach(grid: GridView) -> None:
    seen: list[GridView] = []
    grid.add_listener(seen.append)
    grid.register_hover_callback(lambda r, c: None)
    grid.set_row_highlight(0)
    assert seen == [grid]

    grid.detach()
    grid.set_row_highlight(1)
    assert seen == [grid]
    assert grid._hover_callback is None
