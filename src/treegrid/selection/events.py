"""Raw input events delivered by the rendering layer.

Events arrive either as these dataclasses or as DOM-shaped payloads
(``{"type": "keydown", "key": "ArrowUp", "shiftKey": true}``), possibly
JSON-encoded. :func:`parse_event` turns a payload into an event.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from ..core.cell import Cell, HeaderType


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release with its modifier flags."""

    key: str
    shift: bool = False
    ctrl: bool = False
    meta: bool = False
    released: bool = False

    @property
    def command(self) -> bool:
        """Ctrl on Windows/Linux, Cmd on macOS."""
        return self.ctrl or self.meta


@dataclass(frozen=True)
class InteractEvent:
    """Click or focus on a body cell. ``shift`` None means "use tracked state"."""

    cell: Cell
    shift: bool | None = None


@dataclass(frozen=True)
class MouseEnterEvent:
    """Pointer entered a body cell. ``buttons`` is the DOM pressed-button mask."""

    cell: Cell
    buttons: int = 0


@dataclass(frozen=True)
class HeaderClickEvent:
    header_type: HeaderType
    index: int
    shift: bool = False


@dataclass(frozen=True)
class OutsideClickEvent:
    """A click landed outside the grid's bounding region."""


GridEvent = Union[KeyEvent, InteractEvent, MouseEnterEvent, HeaderClickEvent, OutsideClickEvent]


def _cell_from(data: dict) -> Cell:
    source = data["cell"] if "cell" in data else data
    try:
        return Cell.from_dict(source)
    except (KeyError, TypeError, ValueError):
        raise ValueError(
            f"{data.get('type')} event needs an integer 'row' and 'column', got {source!r}"
        ) from None


def parse_event(payload: str | dict[str, Any]) -> GridEvent:
    """Decode a payload from the rendering layer into a typed event."""
    data = json.loads(payload) if isinstance(payload, str) else dict(payload)
    kind = data.get("type")
    if kind in ("keydown", "keyup"):
        if "key" not in data:
            raise ValueError(f"{kind} event is missing 'key': {data}")
        return KeyEvent(
            key=data["key"],
            shift=bool(data.get("shiftKey", False)),
            ctrl=bool(data.get("ctrlKey", False)),
            meta=bool(data.get("metaKey", False)),
            released=kind == "keyup",
        )
    if kind in ("interact", "focus", "click"):
        shift = data.get("shiftKey")
        return InteractEvent(cell=_cell_from(data), shift=None if shift is None else bool(shift))
    if kind == "mouseenter":
        return MouseEnterEvent(cell=_cell_from(data), buttons=int(data.get("buttons", 0)))
    if kind == "header":
        try:
            header_type = HeaderType(str(data["headerType"]).upper())
        except (KeyError, ValueError):
            valid = [t.value for t in HeaderType]
            raise ValueError(
                f"header event needs headerType in {valid}, got {data.get('headerType')!r}"
            ) from None
        try:
            index = int(data["index"])
        except (KeyError, TypeError, ValueError):
            raise ValueError(
                f"header event needs an integer 'index', got {data.get('index')!r}"
            ) from None
        return HeaderClickEvent(
            header_type=header_type,
            index=index,
            shift=bool(data.get("shiftKey", False)),
        )
    if kind == "outside":
        return OutsideClickEvent()
    raise ValueError(f"Unknown event type {kind!r}.")
