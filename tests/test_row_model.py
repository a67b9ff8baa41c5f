"""Tests for flattening, visible-row projection and the DataFrame view."""

import numpy as np
import pandas as pd

from treegrid.core.cell import Cell
from treegrid.selection.clipboard import frame_content_accessor
from treegrid.selection.engine import SpreadsheetSelection
from treegrid.selection.events import KeyEvent
from treegrid.tree.reparent import move_row, remap_expanded
from treegrid.tree.row_model import (
    flatten_forest,
    forest_to_frame,
    row_id_to_flat_index,
    visible_row_numbers,
)


class TestFlattenForest:
    def test_preorder_ids(self, people_forest):
        flat = flatten_forest(people_forest)
        assert [r.id for r in flat] == ["0", "0.0", "0.1", "0.1.0", "1"]
        assert [r.node["name"] for r in flat] == ["Ada", "Byron", "Carla", "Dov", "Eve"]

    def test_depth_parent_children(self, people_forest):
        flat = flatten_forest(people_forest)
        dov = flat[3]
        assert dov.depth == 2
        assert dov.parent_id == "0.1"
        assert dov.path == (0, 1, 0)
        assert flat[0].parent_id is None
        assert flat[0].has_children
        assert not flat[1].has_children

    def test_empty_forest(self):
        assert flatten_forest([]) == []

    def test_row_id_lookup(self, people_forest):
        lookup = row_id_to_flat_index(flatten_forest(people_forest))
        assert lookup == {"0": 0, "0.0": 1, "0.1": 2, "0.1.0": 3, "1": 4}


class TestVisibleRowNumbers:
    def test_all_collapsed(self, people_forest):
        flat = flatten_forest(people_forest)
        assert visible_row_numbers(flat, {}).tolist() == [0, 4]
        assert visible_row_numbers(flat, False).tolist() == [0, 4]

    def test_all_expanded(self, people_forest):
        flat = flatten_forest(people_forest)
        result = visible_row_numbers(flat, True)
        assert result.dtype == np.int64
        assert result.tolist() == [0, 1, 2, 3, 4]

    def test_partial_expansion(self, people_forest):
        flat = flatten_forest(people_forest)
        assert visible_row_numbers(flat, {"0": True}).tolist() == [0, 1, 2, 4]

    def test_child_expanded_under_collapsed_parent_stays_hidden(self, people_forest):
        flat = flatten_forest(people_forest)
        assert visible_row_numbers(flat, {"0.1": True}).tolist() == [0, 4]

    def test_navigation_skips_collapsed_subtree(self, people_forest):
        flat = flatten_forest(people_forest)
        grid = SpreadsheetSelection(
            number_of_rows=len(flat),
            number_of_columns=2,
            visible_rows=visible_row_numbers(flat, {}),
        )
        grid.cell_interact(Cell(0, 0))
        grid.handle_key_down(KeyEvent(key="ArrowDown"))
        assert grid.state.anchor == Cell(4, 0)


class TestForestToFrame:
    def test_frame_layout(self, people_forest):
        df = forest_to_frame(people_forest)
        assert df.index.tolist() == ["0", "0.0", "0.1", "0.1.0", "1"]
        assert df.index.name == "row_id"
        assert list(df.columns) == ["depth", "name", "age"]
        assert df["depth"].tolist() == [0, 1, 1, 2, 0]
        assert "subRows" not in df.columns

    def test_selected_columns(self, people_forest):
        df = forest_to_frame(people_forest, columns=["age", "email"], include_depth=False)
        assert list(df.columns) == ["age", "email"]
        assert df["email"].isna().all()

    def test_copy_from_frame(self, people_forest):
        df = forest_to_frame(people_forest, columns=["name", "age"], include_depth=False)
        copied = []
        grid = SpreadsheetSelection(
            number_of_rows=len(df),
            number_of_columns=df.shape[1],
            content_of=frame_content_accessor(df),
            on_copy=copied.append,
        )
        grid.cell_interact(Cell(1, 0))
        grid.cell_interact(Cell(2, 1), shift=True)
        grid.handle_key_down(KeyEvent(key="c", ctrl=True))
        assert copied == ["Byron\t12\nCarla\t9"]

    def test_empty_forest_frame(self):
        df = forest_to_frame([])
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 0


class TestReparentRoundTrip:
    def test_drag_then_refeed_engine(self, people_forest):
        expanded = {"0": True, "0.1": True}
        grid = SpreadsheetSelection(5, 2)
        new_forest = move_row(people_forest, "0.1", "1")
        expanded = remap_expanded(expanded, "0.1", "1")
        flat = flatten_forest(new_forest)
        assert [r.id for r in flat] == ["0", "0.0", "1", "1.0", "2"]
        grid.resize(
            number_of_rows=len(flat),
            visible_rows=visible_row_numbers(flat, expanded),
        )
        # Ada expanded, Carla now at "1" and still expanded
        assert grid.visible_rows.tolist() == [0, 1, 2, 3, 4]
