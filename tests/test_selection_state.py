"""Tests for SelectionState: anchor/extent mutation and the range cache."""

from treegrid.core.cell import Cell
from treegrid.selection.state import SelectionState


class TestSelectionStateBasics:
    def test_starts_empty(self):
        state = SelectionState()
        assert state.anchor is None
        assert state.extent is None
        assert state.shift_held is False
        assert state.range == []
        assert state.is_empty

    def test_set_anchor(self):
        state = SelectionState()
        state.set_anchor(Cell(2, 1))
        assert state.anchor == Cell(2, 1)
        assert state.extent is None
        assert state.range == []

    def test_set_extent_builds_range(self):
        state = SelectionState()
        state.set_anchor(Cell(1, 1))
        state.set_extent(Cell(2, 3))
        assert state.anchor == Cell(1, 1)
        assert state.range_size == 6
        assert state.contains(Cell(2, 2))
        assert not state.contains(Cell(0, 1))

    def test_set_anchor_clears_extent_and_range(self):
        state = SelectionState()
        state.set_anchor(Cell(0, 0))
        state.set_extent(Cell(3, 3))
        state.set_anchor(Cell(5, 0))
        assert state.extent is None
        assert state.range == []
        assert state.row_indices.size == 0

    def test_extent_without_anchor_has_no_range(self):
        state = SelectionState()
        state.set_extent(Cell(2, 2))
        assert state.extent == Cell(2, 2)
        assert state.range == []

    def test_index_arrays_align_with_range(self):
        state = SelectionState()
        state.set_anchor(Cell(0, 1))
        state.set_extent(Cell(1, 2))
        assert state.row_indices.tolist() == [0, 0, 1, 1]
        assert state.column_indices.tolist() == [1, 2, 1, 2]

    def test_range_is_a_copy(self):
        state = SelectionState()
        state.set_anchor(Cell(0, 0))
        state.set_extent(Cell(0, 1))
        state.range.clear()
        assert state.range_size == 2


class TestSelectionStateClear:
    def test_clear_resets_everything(self):
        state = SelectionState()
        state.set_shift_held(True)
        state.set_anchor(Cell(1, 1))
        state.set_extent(Cell(4, 2))
        state.clear()
        assert state.value == {"anchor": None, "extent": None, "shiftHeld": False, "range": []}

    def test_clear_is_idempotent(self):
        state = SelectionState()
        state.set_anchor(Cell(1, 1))
        state.clear()
        first = state.value
        state.clear()
        assert state.value == first
        assert state.anchor is None and state.extent is None and not state.shift_held


class TestSelectionStateCallbacks:
    def test_callback_fires_on_each_mutation(self):
        state = SelectionState()
        seen = []
        state.on_change(lambda s: seen.append((s.anchor, s.extent)))
        state.set_anchor(Cell(0, 0))
        state.set_extent(Cell(1, 1))
        state.clear()
        assert seen == [
            (Cell(0, 0), None),
            (Cell(0, 0), Cell(1, 1)),
            (None, None),
        ]

    def test_shift_change_notifies_once(self):
        state = SelectionState()
        calls = []
        state.on_change(lambda s: calls.append(s.shift_held))
        state.set_shift_held(True)
        state.set_shift_held(True)
        state.set_shift_held(False)
        assert calls == [True, False]

    def test_value_snapshot(self):
        state = SelectionState()
        state.set_anchor(Cell(0, 0))
        state.set_extent(Cell(0, 1))
        assert state.value == {
            "anchor": {"row": 0, "column": 0},
            "extent": {"row": 0, "column": 1},
            "shiftHeld": False,
            "range": [{"row": 0, "column": 0}, {"row": 0, "column": 1}],
        }

    def test_repr(self):
        state = SelectionState()
        assert "range=0" in repr(state)
