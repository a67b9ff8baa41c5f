"""treegrid: headless selection and row reparenting for hierarchical data grids."""

from ._version import __version__
from .core.cell import Cell, HeaderSelection, HeaderType, RangeEdges
from .core.errors import (
    CyclicMoveError,
    InvalidPathError,
    PreconditionError,
    TreeGridError,
)
from .core.geometry import (
    cells_in_rectangle,
    column_selection_level,
    is_same_cell,
    range_edge_flags,
    row_selection_level,
)
from .navigation import translate_cell
from .selection import SelectionState, SpreadsheetSelection, serialize_cells
from .tree import (
    flatten_forest,
    forest_to_frame,
    move_row,
    navigate_tree,
    reparent,
    visible_row_numbers,
)

__all__ = [
    "__version__",
    "Cell",
    "HeaderSelection",
    "HeaderType",
    "RangeEdges",
    "TreeGridError",
    "InvalidPathError",
    "CyclicMoveError",
    "PreconditionError",
    "cells_in_rectangle",
    "column_selection_level",
    "is_same_cell",
    "range_edge_flags",
    "row_selection_level",
    "translate_cell",
    "SelectionState",
    "SpreadsheetSelection",
    "serialize_cells",
    "flatten_forest",
    "forest_to_frame",
    "move_row",
    "navigate_tree",
    "reparent",
    "visible_row_numbers",
]
