"""Serializers: convert selection objects to JSON for the rendering layer."""

from __future__ import annotations

import json

from ..core.cell import RangeEdges
from .engine import SpreadsheetSelection
from .state import SelectionState


def serialize_selection(state: SelectionState) -> str:
    """Serialize anchor, extent, shift flag and range as a JSON string."""
    return json.dumps(state.value)


def serialize_range_edges(edges: RangeEdges) -> str:
    """Serialize one cell's range edges as a JSON string."""
    return json.dumps(edges.to_dict())


def serialize_header_states(selection: SpreadsheetSelection) -> str:
    """Serialize every row and column header level as a JSON string."""
    return json.dumps({
        "rows": [
            selection.row_header_state(i).value
            for i in range(selection.number_of_rows)
        ],
        "columns": [
            selection.column_header_state(j).value
            for j in range(selection.number_of_columns)
        ],
    })
