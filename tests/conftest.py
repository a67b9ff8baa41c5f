"""Shared test fixtures for treegrid."""

import pytest

from treegrid.core.cell import Cell
from treegrid.selection.engine import SpreadsheetSelection


@pytest.fixture
def people_forest():
    """Two top-level rows; the first has two children, one of them nested."""
    return [
        {
            "name": "Ada",
            "age": 36,
            "subRows": [
                {"name": "Byron", "age": 12},
                {
                    "name": "Carla",
                    "age": 9,
                    "subRows": [{"name": "Dov", "age": 1}],
                },
            ],
        },
        {"name": "Eve", "age": 41},
    ]


@pytest.fixture
def letters_content():
    """content_of that renders a cell as '<row letter><column>' e.g. 'B2'."""
    def content_of(cell: Cell) -> str:
        return f"{chr(ord('A') + cell.row)}{cell.column}"
    return content_of


@pytest.fixture
def copied():
    """A list that collects everything handed to on_copy."""
    return []


@pytest.fixture
def grid(letters_content, copied):
    """10 rows x 4 columns engine with a recording copy sink."""
    return SpreadsheetSelection(
        number_of_rows=10,
        number_of_columns=4,
        content_of=letters_content,
        on_copy=copied.append,
    )
