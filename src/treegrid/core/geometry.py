"""Pure geometry over logical cells: equality, rectangles, edges, headers."""

from __future__ import annotations

from collections.abc import Collection, Iterable

import numpy as np

from .cell import Cell, HeaderSelection, RangeEdges


def is_same_cell(a: Cell | None, b: Cell | None) -> bool:
    """Structural equality. ``None`` never equals anything, not even ``None``."""
    return a is not None and b is not None and a.row == b.row and a.column == b.column


def is_cell_in_range(cell: Cell, cells: Collection[Cell]) -> bool:
    return cell in cells


def clamp(value: int, lo: int, hi: int) -> int:
    """Constrain ``value`` to the closed interval [lo, hi]."""
    return min(max(value, lo), hi)


def cells_in_rectangle(a: Cell, b: Cell) -> list[Cell]:
    """All cells in the closed rectangle spanned by ``a`` and ``b``.

    Row-major order (row ascending, then column ascending), independent
    of which corner is passed first.
    """
    top, bottom = min(a.row, b.row), max(a.row, b.row)
    left, right = min(a.column, b.column), max(a.column, b.column)
    return [
        Cell(row, column)
        for row in range(top, bottom + 1)
        for column in range(left, right + 1)
    ]


def sort_cells_row_major(cells: Iterable[Cell]) -> list[Cell]:
    """Return a new list sorted by row, then column."""
    return sorted(cells, key=lambda c: (c.row, c.column))


def range_edge_flags(cell: Cell, cells: Collection[Cell]) -> RangeEdges:
    """Report whether ``cell`` and each of its four neighbours are in ``cells``.

    Pass a set for O(1) lookups on large ranges.
    """
    return RangeEdges(
        in_range=cell in cells,
        neighbor_above=Cell(cell.row - 1, cell.column) in cells,
        neighbor_below=Cell(cell.row + 1, cell.column) in cells,
        neighbor_left=Cell(cell.row, cell.column - 1) in cells,
        neighbor_right=Cell(cell.row, cell.column + 1) in cells,
    )


def cells_on_line(indices: Iterable[int] | np.ndarray, index: int) -> int:
    """Number of entries of ``indices`` equal to ``index``.

    ``indices`` holds the row (or column) index of every cell in range.
    """
    values = np.asarray(indices if isinstance(indices, np.ndarray) else list(indices))
    return int(np.count_nonzero(values == index))


def selection_level(
    count_on_line: int,
    line_length: int,
    anchor_on_line: bool,
) -> HeaderSelection:
    """Tri-state level of one row/column given how many of its cells are in range."""
    if count_on_line == line_length:
        return HeaderSelection.ALL
    if count_on_line > 0 or anchor_on_line:
        return HeaderSelection.SOME
    return HeaderSelection.NONE


def row_selection_level(
    row_index: int,
    anchor: Cell | None,
    cells: Iterable[Cell],
    column_count: int,
) -> HeaderSelection:
    """How much of row ``row_index`` is covered by the selection.

    ALL when every column of the row is in range, SOME when part of it is
    or the anchor sits on the row, NONE otherwise.
    """
    count = cells_on_line([c.row for c in cells], row_index)
    anchor_on_line = anchor is not None and anchor.row == row_index
    return selection_level(count, column_count, anchor_on_line)


def column_selection_level(
    column_index: int,
    anchor: Cell | None,
    cells: Iterable[Cell],
    row_count: int,
) -> HeaderSelection:
    """Column counterpart of :func:`row_selection_level`."""
    count = cells_on_line([c.column for c in cells], column_index)
    anchor_on_line = anchor is not None and anchor.column == column_index
    return selection_level(count, row_count, anchor_on_line)
