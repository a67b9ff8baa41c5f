"""Spreadsheet-style selection: state, events, copy and the engine façade."""

from .clipboard import frame_content_accessor, serialize_cells
from .engine import ARROW_DELTAS, SpreadsheetSelection
from .events import (
    HeaderClickEvent,
    InteractEvent,
    KeyEvent,
    MouseEnterEvent,
    OutsideClickEvent,
    parse_event,
)
from .state import SelectionState

__all__ = [
    "ARROW_DELTAS",
    "SpreadsheetSelection",
    "SelectionState",
    "serialize_cells",
    "frame_content_accessor",
    "KeyEvent",
    "InteractEvent",
    "MouseEnterEvent",
    "HeaderClickEvent",
    "OutsideClickEvent",
    "parse_event",
]
