"""Row forest: path addressing, reparenting and flattening."""

from .reparent import (
    SUBROWS_KEY,
    format_path,
    move_row,
    navigate_tree,
    parse_path,
    remap_expanded,
    reparent,
    update_row_value,
)
from .row_model import (
    FlatRow,
    flatten_forest,
    forest_to_frame,
    row_id_to_flat_index,
    visible_row_numbers,
)

__all__ = [
    "SUBROWS_KEY",
    "format_path",
    "move_row",
    "navigate_tree",
    "parse_path",
    "remap_expanded",
    "reparent",
    "update_row_value",
    "FlatRow",
    "flatten_forest",
    "forest_to_frame",
    "row_id_to_flat_index",
    "visible_row_numbers",
]
