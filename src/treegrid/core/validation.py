"""Input validation with clear error messages for grid callers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from .errors import InvalidPathError, PreconditionError

PATH_SEPARATOR = "."


def validate_extent(value: Any, axis_name: str) -> int:
    """Validate a row or column count. Zero is allowed (an empty grid).

    Returns the count as an int.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(
            f"number_of_{axis_name}s must be an integer, got {type(value).__name__}."
        )
    if value < 0:
        raise PreconditionError(
            f"number_of_{axis_name}s must be non-negative, got {value}."
        )
    return int(value)


def require_nonempty_grid(row_count: int, column_count: int) -> None:
    """Raise if either extent is non-positive.

    Cell-relative operations (navigation, select-all) have no valid
    result on an empty grid.
    """
    if row_count <= 0 or column_count <= 0:
        raise PreconditionError(
            f"Grid has no cells ({row_count} rows x {column_count} columns)."
        )


def validate_visible_rows(visible_rows: Any, row_count: int | None = None) -> np.ndarray:
    """Validate a visible-row projection.

    Must be a non-empty, strictly ascending sequence of non-negative
    integers. When ``row_count`` is given every entry must also be a row
    of the grid. Returns it as an int64 array.
    """
    arr = np.asarray(visible_rows)
    if arr.ndim != 1:
        raise PreconditionError(
            f"visible_rows must be one-dimensional, got shape {arr.shape}."
        )
    if len(arr) == 0:
        raise PreconditionError("visible_rows is empty. Provide at least one row.")
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"visible_rows must contain integers, got dtype {arr.dtype}.")
    arr = arr.astype(np.int64)
    if arr[0] < 0:
        raise PreconditionError(f"visible_rows must be non-negative, got {arr[0]}.")
    steps = np.diff(arr)
    if np.any(steps <= 0):
        bad = int(np.argmax(steps <= 0))
        raise PreconditionError(
            "visible_rows must be strictly ascending. "
            f"Found {arr[bad]} followed by {arr[bad + 1]}."
        )
    if row_count is not None and arr[-1] >= row_count:
        raise PreconditionError(
            f"visible_rows points past the grid: row {arr[-1]} "
            f"but only {row_count} rows."
        )
    return arr


def validate_path(path: Any) -> tuple[int, ...]:
    """Normalize a row path to a tuple of sibling indices.

    Accepts a dot-joined row id (``"0.2.1"``) or a sequence of integers.
    Only syntax is checked here; resolution against a forest happens in
    ``treegrid.tree.reparent``.
    """
    if isinstance(path, str):
        if not path:
            raise InvalidPathError("Row id is empty.")
        parts = path.split(PATH_SEPARATOR)
        try:
            indices = tuple(int(p) for p in parts)
        except ValueError:
            raise InvalidPathError(
                f"Row id {path!r} must be dot-joined integers like '0.2.1'."
            ) from None
    elif isinstance(path, Sequence):
        indices = tuple(path)
        for i in indices:
            if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
                raise InvalidPathError(
                    f"Path {list(path)!r} must contain integers, "
                    f"got {type(i).__name__}."
                )
        indices = tuple(int(i) for i in indices)
    else:
        raise InvalidPathError(
            f"Expected a row id string or index sequence, got {type(path).__name__}."
        )
    if len(indices) == 0:
        raise InvalidPathError("Path is empty. A path needs at least one index.")
    negative = [i for i in indices if i < 0]
    if negative:
        raise InvalidPathError(
            f"Path {list(indices)} contains negative indices: {negative}"
        )
    return indices
