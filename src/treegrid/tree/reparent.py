"""Row forest editing: path addressing, reparenting and cell edits.

A forest is a list of row nodes. Each node is a mapping whose ``subRows``
entry (when present) holds its ordered children. A node is addressed by
its path, the tuple of sibling indices from the root, or by its row id,
the dot-joined path (``"0.2.1"``).

Every function here returns a new forest. The caller's forest is deep
copied first and never mutated, so a failed call leaves it untouched.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Union

from ..core.errors import CyclicMoveError, InvalidPathError
from ..core.validation import PATH_SEPARATOR, validate_path

logger = logging.getLogger(__name__)

SUBROWS_KEY = "subRows"

Forest = list[dict[str, Any]]
PathLike = Union[str, Sequence[int]]
ExpandedState = Union[bool, Mapping[str, bool]]


def parse_path(row_id: str) -> tuple[int, ...]:
    """``"0.2.1"`` -> ``(0, 2, 1)``."""
    if not isinstance(row_id, str):
        raise InvalidPathError(f"Row id must be a string, got {type(row_id).__name__}.")
    return validate_path(row_id)


def format_path(path: Sequence[int]) -> str:
    """``(0, 2, 1)`` -> ``"0.2.1"``."""
    return PATH_SEPARATOR.join(str(i) for i in validate_path(path))


def _children_of(node: Any, path: tuple[int, ...], depth: int) -> MutableSequence:
    sub_rows = node.get(SUBROWS_KEY) if isinstance(node, Mapping) else None
    if not isinstance(sub_rows, MutableSequence):
        raise InvalidPathError(
            f"Invalid path {list(path)}: node at {list(path[:depth])} has no {SUBROWS_KEY}."
        )
    return sub_rows


def _siblings_at(forest: MutableSequence, path: tuple[int, ...]) -> MutableSequence:
    """Return the sequence that holds the node ``path`` points at.

    Every ancestor along the way must exist; the final index is not checked.
    """
    siblings = forest
    for depth, index in enumerate(path[:-1]):
        if index >= len(siblings):
            raise InvalidPathError(
                f"Invalid path {list(path)}: dead end at index {index} "
                f"(only {len(siblings)} rows at depth {depth})."
            )
        siblings = _children_of(siblings[index], path, depth + 1)
    return siblings


def navigate_tree(forest: Sequence, path: PathLike) -> Any:
    """Return the node at ``path``. Raises InvalidPathError if it doesn't exist."""
    indices = validate_path(path)
    siblings = _siblings_at(forest, indices)
    index = indices[-1]
    if index >= len(siblings):
        raise InvalidPathError(
            f"Invalid path {list(indices)}: dead end at index {index} "
            f"(only {len(siblings)} rows at depth {len(indices) - 1})."
        )
    return siblings[index]


def reparent(forest: Sequence, source_path: PathLike, target_path: PathLike) -> Forest:
    """Move the node at ``source_path`` to ``target_path``.

    The node is removed first, then inserted at the target index of the
    target's parent, shifting later siblings right. When both paths share
    a parent and the source comes first, the target index is decremented
    to account for the removal. The target index may equal the sibling
    count (append).

    Raises
    ------
    InvalidPathError
        A component of either path does not resolve.
    CyclicMoveError
        The target lies inside the source's own subtree.
    """
    source = validate_path(source_path)
    target = validate_path(target_path)

    if len(target) > len(source) and target[: len(source)] == source:
        logger.warning(
            "Rejected move of %s into its own subtree at %s",
            format_path(source), format_path(target),
        )
        raise CyclicMoveError(
            f"Cannot move row {format_path(source)} into its own subtree "
            f"({format_path(target)})."
        )

    result = copy.deepcopy(list(forest))
    navigate_tree(result, source)  # validates the source exists
    if source == target:
        return result

    source_siblings = _siblings_at(result, source)
    node = source_siblings.pop(source[-1])

    insert_at = target[-1]
    if source[:-1] == target[:-1] and source[-1] < insert_at:
        insert_at -= 1

    target_siblings = _siblings_at(result, target)
    if insert_at > len(target_siblings):
        raise InvalidPathError(
            f"Invalid path {list(target)}: cannot insert at index {insert_at} "
            f"of {len(target_siblings)} rows."
        )
    target_siblings.insert(insert_at, node)
    logger.info(
        "Moved row %s to %s (inserted at index %d)",
        format_path(source), format_path(target), insert_at,
    )
    return result


def move_row(forest: Sequence, drag_id: str, drop_id: str) -> Forest:
    """Drag-and-drop entry point: move row ``drag_id`` onto row ``drop_id``.

    Dropping a row on itself returns an unchanged copy.
    """
    if drag_id == drop_id:
        logger.debug("Drop of row %s onto itself ignored", drag_id)
        navigate_tree(forest, parse_path(drag_id))
        return copy.deepcopy(list(forest))
    return reparent(forest, parse_path(drag_id), parse_path(drop_id))


def remap_expanded(expanded: ExpandedState, drag_id: str, drop_id: str) -> ExpandedState:
    """Carry a dragged row's expanded flag over to its new row id.

    ``True`` (everything expanded) passes through unchanged.
    """
    if expanded is True or expanded is False:
        return expanded
    out = dict(expanded)
    if out.get(drag_id):
        out[drop_id] = True
    out.pop(drag_id, None)
    return out


def update_row_value(forest: Sequence, path: PathLike, column_id: str, value: Any) -> Forest:
    """Commit a cell edit: return a new forest with one field of one row replaced."""
    if column_id == SUBROWS_KEY:
        raise ValueError(f"'{SUBROWS_KEY}' holds child rows and cannot be edited as a value.")
    result = copy.deepcopy(list(forest))
    node = navigate_tree(result, path)
    if not isinstance(node, MutableMapping):
        raise InvalidPathError(
            f"Row at {list(validate_path(path))} is a {type(node).__name__}, not a mapping."
        )
    node[column_id] = value
    logger.debug("Updated %s of row %s", column_id, path)
    return result
