"""SpreadsheetSelection: the event façade over selection state.

Translates raw keyboard, mouse and focus events into anchor/extent
mutations, and answers the per-frame queries a renderer needs to style
body cells and headers. Headless: the engine never touches a widget, a
DOM or the system clipboard.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable

import numpy as np

from ..core.cell import Cell, HeaderSelection, HeaderType, RangeEdges
from ..core.geometry import (
    cells_on_line,
    is_same_cell,
    range_edge_flags,
    selection_level,
)
from ..core.validation import (
    require_nonempty_grid,
    validate_extent,
    validate_visible_rows,
)
from ..navigation.resolver import translate_cell
from .clipboard import ContentAccessor, serialize_cells
from .events import (
    GridEvent,
    HeaderClickEvent,
    InteractEvent,
    KeyEvent,
    MouseEnterEvent,
    OutsideClickEvent,
    parse_event,
)
from .state import SelectionState

logger = logging.getLogger(__name__)

ARROW_DELTAS: dict[str, Cell] = {
    "ArrowLeft": Cell(0, -1),
    "ArrowRight": Cell(0, 1),
    "ArrowUp": Cell(-1, 0),
    "ArrowDown": Cell(1, 0),
}
COPY_KEY = "c"
SELECT_ALL_KEY = "a"
SHIFT_KEY = "Shift"
PRIMARY_BUTTON = 1

CopySink = Callable[[str], Any]

_UNSET: Any = object()


def _empty_content(cell: Cell) -> str:
    return ""


class SpreadsheetSelection:
    """Headless spreadsheet-style selection for a 2D grid.

    Parameters
    ----------
    number_of_rows, number_of_columns : current logical grid extents
    content_of : ``fn(cell) -> str`` used only when copying
    on_copy : ``fn(text)`` sink receiving serialized copy text
    visible_rows : optional strictly ascending visible row indices. When
        given, vertical navigation skips rows that are not listed.
    """

    def __init__(
        self,
        number_of_rows: int,
        number_of_columns: int,
        content_of: ContentAccessor | None = None,
        on_copy: CopySink | None = None,
        visible_rows: Sequence[int] | np.ndarray | None = None,
    ) -> None:
        self._n_rows = validate_extent(number_of_rows, "row")
        self._n_cols = validate_extent(number_of_columns, "column")
        self._visible_rows = (
            None
            if visible_rows is None
            else validate_visible_rows(visible_rows, self._n_rows)
        )
        self._content_of = content_of or _empty_content
        self._on_copy = on_copy
        self._state = SelectionState()

    # --- Configuration ---

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def number_of_rows(self) -> int:
        return self._n_rows

    @property
    def number_of_columns(self) -> int:
        return self._n_cols

    @property
    def visible_rows(self) -> np.ndarray | None:
        return self._visible_rows

    def resize(
        self,
        number_of_rows: int | None = None,
        number_of_columns: int | None = None,
        visible_rows: Sequence[int] | np.ndarray | None = _UNSET,
    ) -> None:
        """Re-feed grid extents, e.g. after the row forest was replaced.

        Omitted arguments keep their current value; ``visible_rows=None``
        turns the projection off. A kept projection is re-checked against a
        new row count, so shrinking the grid without re-feeding
        ``visible_rows`` raises PreconditionError and changes nothing.
        """
        n_rows = self._n_rows
        if number_of_rows is not None:
            n_rows = validate_extent(number_of_rows, "row")
        n_cols = self._n_cols
        if number_of_columns is not None:
            n_cols = validate_extent(number_of_columns, "column")
        rows = self._visible_rows if visible_rows is _UNSET else visible_rows
        if rows is not None:
            rows = validate_visible_rows(rows, n_rows)
        self._n_rows, self._n_cols, self._visible_rows = n_rows, n_cols, rows
        logger.debug("grid resized to %d x %d", self._n_rows, self._n_cols)

    # --- Queries ---

    @property
    def is_anchored(self) -> bool:
        return self._state.anchor is not None

    def is_cell_selected(self, cell: Cell) -> bool:
        """Whether ``cell`` is the anchor (the focused cell)."""
        return is_same_cell(cell, self._state.anchor)

    def is_cell_in_range(self, cell: Cell) -> bool:
        return self._state.contains(cell)

    def range_edge_flags(self, cell: Cell) -> RangeEdges:
        return range_edge_flags(cell, self._state.range_set)

    def row_header_state(self, index: int) -> HeaderSelection:
        count = cells_on_line(self._state.row_indices, index)
        anchor = self._state.anchor
        return selection_level(count, self._n_cols, anchor is not None and anchor.row == index)

    def column_header_state(self, index: int) -> HeaderSelection:
        count = cells_on_line(self._state.column_indices, index)
        anchor = self._state.anchor
        return selection_level(count, self._n_rows, anchor is not None and anchor.column == index)

    def header_state(self, header_type: HeaderType, index: int) -> HeaderSelection:
        if header_type is HeaderType.ROW:
            return self.row_header_state(index)
        return self.column_header_state(index)

    def selected_text(self) -> str | None:
        """Copy text for the current selection, or None when idle."""
        anchor = self._state.anchor
        if anchor is None:
            return None
        cells = self._state.range or [anchor]
        return serialize_cells(cells, self._content_of)

    # --- Mouse / focus ---

    def cell_interact(self, cell: Cell, shift: bool | None = None) -> None:
        """Plain click/focus anchors; a shift-modified one extends.

        ``shift`` None falls back to the tracked Shift key state. With no
        anchor yet, a shift interaction anchors instead.
        """
        if shift is None:
            shift = self._state.shift_held
        if shift and self.is_anchored:
            self._state.set_extent(cell)
        else:
            self._state.set_anchor(cell)

    def cell_mouse_enter(self, cell: Cell, buttons: int) -> None:
        """Drag-to-extend while the primary button is held."""
        if self.is_anchored and buttons == PRIMARY_BUTTON:
            self._state.set_extent(cell)

    def header_click(self, header_type: HeaderType, index: int, shift: bool = False) -> None:
        """Select a whole row or column; shift extends from the current anchor."""
        require_nonempty_grid(self._n_rows, self._n_cols)
        if header_type is HeaderType.ROW:
            start, end = Cell(index, 0), Cell(index, self._n_cols - 1)
        else:
            start, end = Cell(0, index), Cell(self._n_rows - 1, index)
        if not shift or not self.is_anchored:
            self._state.set_anchor(start)
        self._state.set_extent(end)

    def outside_click(self) -> None:
        self._state.clear()

    # --- Keyboard ---

    def select_all(self) -> None:
        require_nonempty_grid(self._n_rows, self._n_cols)
        self._state.set_anchor(Cell(0, 0))
        self._state.set_extent(Cell(self._n_rows - 1, self._n_cols - 1))

    def copy(self) -> str | None:
        """Serialize the selection and hand it to ``on_copy``."""
        text = self.selected_text()
        if text is None:
            return None
        if self._on_copy is None:
            logger.debug("copy requested but no on_copy sink is configured")
        else:
            self._on_copy(text)
        return text

    def handle_key_down(self, event: KeyEvent) -> bool:
        """Apply a key press. Returns True when the default action is suppressed."""
        if event.key == SHIFT_KEY:
            self._state.set_shift_held(True)
            return False
        if not self.is_anchored:
            return False

        delta = ARROW_DELTAS.get(event.key)
        if delta is not None:
            self._move(delta, extend=event.shift)
            return True

        key = event.key.lower()
        if event.command and key == COPY_KEY:
            self.copy()
            return True
        if event.command and key == SELECT_ALL_KEY:
            self.select_all()
            return True
        return False

    def handle_key_up(self, event: KeyEvent) -> None:
        if event.key == SHIFT_KEY:
            self._state.set_shift_held(False)

    def _move(self, delta: Cell, extend: bool) -> None:
        if extend:
            origin = self._state.extent or self._state.anchor
        else:
            origin = self._state.anchor
        target = translate_cell(
            origin, delta, self._n_rows, self._n_cols, self._visible_rows,
            validate=False,
        )
        if extend:
            self._state.set_extent(target)
        else:
            self._state.set_anchor(target)
        logger.debug("key move by %s (extend=%s) -> %s", delta, extend, target)

    # --- Dispatch ---

    def dispatch(self, event: GridEvent | str | dict) -> bool:
        """Route a typed event or a raw payload. Returns the suppression flag."""
        if isinstance(event, (str, dict)):
            event = parse_event(event)
        if isinstance(event, KeyEvent):
            if event.released:
                self.handle_key_up(event)
                return False
            return self.handle_key_down(event)
        if isinstance(event, InteractEvent):
            self.cell_interact(event.cell, event.shift)
        elif isinstance(event, MouseEnterEvent):
            self.cell_mouse_enter(event.cell, event.buttons)
        elif isinstance(event, HeaderClickEvent):
            self.header_click(event.header_type, event.index, event.shift)
        elif isinstance(event, OutsideClickEvent):
            self.outside_click()
        else:
            raise TypeError(f"Unsupported event {type(event).__name__}.")
        return False

    def __repr__(self) -> str:
        return (
            f"SpreadsheetSelection({self._n_rows}x{self._n_cols}, "
            f"anchor={self._state.anchor}, extent={self._state.extent})"
        )
