"""Row model: flatten a row forest into grid rows.

Flat order is a pre-order walk (parent, then its subRows), which is the
render order of a fully expanded grid. Flat indices are the row indices
the selection engine works with.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from .reparent import SUBROWS_KEY, ExpandedState, format_path


@dataclass(frozen=True)
class FlatRow:
    """One row of the flattened forest."""

    id: str
    path: tuple[int, ...]
    node: Mapping[str, Any] = field(compare=False, repr=False)

    @property
    def depth(self) -> int:
        return len(self.path) - 1

    @property
    def parent_id(self) -> str | None:
        if len(self.path) == 1:
            return None
        return format_path(self.path[:-1])

    @property
    def has_children(self) -> bool:
        return bool(self.node.get(SUBROWS_KEY))


def flatten_forest(forest: Sequence[Mapping[str, Any]]) -> list[FlatRow]:
    """Pre-order list of every row in ``forest``."""
    rows: list[FlatRow] = []
    # Stack of (node, path), children pushed in reverse to keep sibling order
    stack = [(node, (i,)) for i, node in reversed(list(enumerate(forest)))]
    while stack:
        node, path = stack.pop()
        rows.append(FlatRow(id=format_path(path), path=path, node=node))
        children = node.get(SUBROWS_KEY) or []
        for j in range(len(children) - 1, -1, -1):
            stack.append((children[j], path + (j,)))
    return rows


def row_id_to_flat_index(flat_rows: Sequence[FlatRow]) -> dict[str, int]:
    return {row.id: i for i, row in enumerate(flat_rows)}


def visible_row_numbers(
    flat_rows: Sequence[FlatRow],
    expanded: ExpandedState,
) -> np.ndarray:
    """Flat indices of rows whose ancestors are all expanded.

    Parameters
    ----------
    flat_rows : output of :func:`flatten_forest`
    expanded : ``True`` for everything expanded, or {row_id: bool}

    Returns a strictly ascending int64 array, suitable as the
    ``visible_rows`` projection of the selection engine.
    """
    if expanded is True:
        return np.arange(len(flat_rows), dtype=np.int64)
    flags = {} if expanded is False else expanded
    shown: set[str] = set()
    visible: list[int] = []
    for i, row in enumerate(flat_rows):
        parent = row.parent_id
        if parent is None or (parent in shown and flags.get(parent, False)):
            shown.add(row.id)
            visible.append(i)
    return np.asarray(visible, dtype=np.int64)


def forest_to_frame(
    forest: Sequence[Mapping[str, Any]],
    columns: Sequence[str] | None = None,
    include_depth: bool = True,
) -> pd.DataFrame:
    """Tabular view of the forest: one row per flat row, indexed by row id.

    Parameters
    ----------
    columns : value keys to include, in order. Defaults to every key seen,
        in first-seen order. Missing values are NaN.
    include_depth : prepend a ``depth`` column with each row's nesting level.
    """
    flat = flatten_forest(forest)
    records = [
        {k: v for k, v in row.node.items() if k != SUBROWS_KEY}
        for row in flat
    ]
    index = pd.Index([row.id for row in flat], name="row_id", dtype=object)
    df = pd.DataFrame(records, index=index)
    if columns is not None:
        df = df.reindex(columns=list(columns))
    if include_depth:
        df.insert(0, "depth", [row.depth for row in flat])
    return df
