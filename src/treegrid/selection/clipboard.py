"""Copy serializer: selected cells to tab/newline-delimited text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable

import pandas as pd

from ..core.cell import Cell
from ..core.errors import PreconditionError

ContentAccessor = Callable[[Cell], str]


def serialize_cells(cells: Sequence[Cell], content_of: ContentAccessor) -> str:
    """Join cell contents the way spreadsheets paste them.

    ``cells`` must already be row-major. A tab separates cells within a
    row and a newline starts each new row.
    """
    if len(cells) == 0:
        raise PreconditionError("Cannot serialize an empty selection.")
    parts: list[str] = []
    current_row = cells[0].row
    for i, cell in enumerate(cells):
        if cell.row != current_row:
            parts.append("\n")
            current_row = cell.row
        elif i > 0:
            parts.append("\t")
        parts.append(content_of(cell))
    return "".join(parts)


def frame_content_accessor(frame: pd.DataFrame) -> ContentAccessor:
    """Build a ``content_of`` that reads cells positionally from ``frame``.

    Row and column of a cell are iloc positions. Missing values and
    positions outside the frame read as the empty string.
    """
    n_rows, n_cols = frame.shape

    def content_of(cell: Cell) -> str:
        if not (0 <= cell.row < n_rows and 0 <= cell.column < n_cols):
            return ""
        value = frame.iat[cell.row, cell.column]
        if pd.api.types.is_scalar(value) and pd.isna(value):
            return ""
        return str(value)

    return content_of
