"""Value types shared by the selection engine: cells, header states, edges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Cell:
    """A logical grid position.

    Also used as a directional delta for navigation. Ordering is
    row-major: rows first, then columns.
    """

    row: int
    column: int

    def to_dict(self) -> dict:
        return {"row": self.row, "column": self.column}

    @classmethod
    def from_dict(cls, data: dict) -> Cell:
        return cls(row=int(data["row"]), column=int(data["column"]))


class HeaderType(Enum):
    ROW = "ROW"
    COLUMN = "COLUMN"


class HeaderSelection(Enum):
    """Tri-state selection level of a row or column header."""

    NONE = "none"
    SOME = "some"
    ALL = "all"


@dataclass(frozen=True)
class RangeEdges:
    """Range membership of a cell and of its four neighbours.

    Lets a renderer paint contiguous selection borders: an edge gets a
    border when the cell is in range and the neighbour on that side is not.
    """

    in_range: bool
    neighbor_above: bool
    neighbor_below: bool
    neighbor_left: bool
    neighbor_right: bool

    def to_dict(self) -> dict:
        return {
            "inRange": self.in_range,
            "enclosedTop": self.neighbor_above,
            "enclosedBottom": self.neighbor_below,
            "enclosedLeft": self.neighbor_left,
            "enclosedRight": self.neighbor_right,
        }
