"""SelectionState: anchor/extent container + callback registry."""

from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np

from ..core.cell import Cell
from ..core.geometry import cells_in_rectangle

logger = logging.getLogger(__name__)

StateCallback = Callable[["SelectionState"], Any]


class SelectionState:
    """Holds the anchor, extent and derived range of a grid selection.

    The range is the closed rectangle between anchor and extent, cached as
    a row-major list, a membership set and row/column index arrays. It is
    recomputed on every anchor or extent change and is empty while either
    corner is missing. Registered callbacks run after every mutation.
    """

    def __init__(self) -> None:
        self._anchor: Cell | None = None
        self._extent: Cell | None = None
        self._shift_held = False
        self._range: list[Cell] = []
        self._range_set: frozenset[Cell] = frozenset()
        self._range_rows = np.empty(0, dtype=np.int64)
        self._range_cols = np.empty(0, dtype=np.int64)
        self._callbacks: list[StateCallback] = []

    # --- Read access ---

    @property
    def anchor(self) -> Cell | None:
        return self._anchor

    @property
    def extent(self) -> Cell | None:
        return self._extent

    @property
    def shift_held(self) -> bool:
        return self._shift_held

    @property
    def range(self) -> list[Cell]:
        """Cells in the active rectangle, row-major. Empty without an extent."""
        return list(self._range)

    @property
    def range_set(self) -> frozenset[Cell]:
        return self._range_set

    @property
    def range_size(self) -> int:
        return len(self._range)

    @property
    def row_indices(self) -> np.ndarray:
        """Row index of every range cell, aligned with :attr:`range`."""
        return self._range_rows

    @property
    def column_indices(self) -> np.ndarray:
        """Column index of every range cell, aligned with :attr:`range`."""
        return self._range_cols

    @property
    def is_empty(self) -> bool:
        return self._anchor is None and self._extent is None

    @property
    def value(self) -> dict:
        """Snapshot as plain data: {anchor, extent, shiftHeld, range}."""
        return {
            "anchor": self._anchor.to_dict() if self._anchor else None,
            "extent": self._extent.to_dict() if self._extent else None,
            "shiftHeld": self._shift_held,
            "range": [c.to_dict() for c in self._range],
        }

    def contains(self, cell: Cell) -> bool:
        """Whether ``cell`` lies in the active range."""
        return cell in self._range_set

    # --- Mutation ---

    def set_anchor(self, cell: Cell) -> None:
        """Start a new selection at ``cell``, dropping extent and range."""
        self._anchor = cell
        self._extent = None
        self._recompute_range()
        logger.debug("anchor set to %s", cell)
        self._notify()

    def set_extent(self, cell: Cell) -> None:
        """Move the opposite corner of the selection. The anchor is kept."""
        self._extent = cell
        self._recompute_range()
        logger.debug("extent set to %s (range of %d cells)", cell, len(self._range))
        self._notify()

    def clear(self) -> None:
        """Drop anchor, extent and range."""
        self._anchor = None
        self._extent = None
        self._shift_held = False
        self._recompute_range()
        logger.debug("selection cleared")
        self._notify()

    def set_shift_held(self, held: bool) -> None:
        if held == self._shift_held:
            return
        self._shift_held = held
        self._notify()

    def on_change(self, callback: StateCallback) -> None:
        """Register a callback: fn(state)."""
        self._callbacks.append(callback)

    # --- Internals ---

    def _recompute_range(self) -> None:
        if self._anchor is None or self._extent is None:
            cells: list[Cell] = []
        else:
            cells = cells_in_rectangle(self._anchor, self._extent)
        self._range = cells
        self._range_set = frozenset(cells)
        self._range_rows = np.fromiter((c.row for c in cells), dtype=np.int64, count=len(cells))
        self._range_cols = np.fromiter((c.column for c in cells), dtype=np.int64, count=len(cells))

    def _notify(self) -> None:
        for cb in self._callbacks:
            cb(self)

    def __repr__(self) -> str:
        return (
            f"SelectionState(anchor={self._anchor}, extent={self._extent}, "
            f"range={len(self._range)})"
        )
