"""Navigation resolver: move a cell by a delta within grid bounds.

Row movement can be projected onto the currently visible rows, so that a
single arrow keystroke jumps over a collapsed subtree instead of landing
on hidden rows one at a time.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..core.cell import Cell
from ..core.geometry import clamp
from ..core.validation import require_nonempty_grid, validate_visible_rows


def _resolve_row(rows: np.ndarray, row: int, delta: int) -> int:
    # rows is a validated int64 projection
    if delta == 0:
        return row
    target = row + delta
    if target >= rows[-1]:
        return int(rows[-1])
    if target <= rows[0]:
        return int(rows[0])
    # First index whose value is >= target
    idx = int(np.searchsorted(rows, target, side="left"))
    if rows[idx] == target:
        return int(rows[idx])
    if delta > 0:
        return int(rows[idx])
    return int(rows[idx - 1])


def nearest_visible_row(
    visible_rows: Sequence[int] | np.ndarray,
    row: int,
    delta: int,
) -> int:
    """Resolve ``row + delta`` onto the visible row projection.

    Parameters
    ----------
    visible_rows : strictly ascending visible row indices (non-empty)
    row : current row index
    delta : signed row step. Zero returns ``row`` unchanged.

    Targets past either end snap to the first/last visible row. Otherwise
    an exact hit is returned; a miss resolves to the next visible row in
    the direction of travel.
    """
    if delta == 0:
        return row
    return _resolve_row(validate_visible_rows(visible_rows), row, delta)


def translate_cell(
    cell: Cell,
    delta: Cell,
    row_count: int,
    column_count: int,
    visible_rows: Sequence[int] | np.ndarray | None = None,
    *,
    validate: bool = True,
) -> Cell:
    """Return ``cell`` moved by ``delta``, clamped to the grid.

    Each axis is resolved independently. Without ``visible_rows`` the row
    is clamped to [0, row_count - 1]; with it, the row is resolved by
    :func:`nearest_visible_row` and every visible row must lie inside the
    grid. Pass ``validate=False`` only with a projection already checked
    by ``validate_visible_rows`` against ``row_count``.
    """
    require_nonempty_grid(row_count, column_count)
    column = clamp(cell.column + delta.column, 0, column_count - 1)
    if visible_rows is None:
        row = cell.row + delta.row
    else:
        if validate:
            visible_rows = validate_visible_rows(visible_rows, row_count)
        row = _resolve_row(visible_rows, cell.row, delta.row)
    return Cell(clamp(row, 0, row_count - 1), column)
