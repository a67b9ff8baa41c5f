"""Exception types raised by treegrid."""

from __future__ import annotations


class TreeGridError(Exception):
    """Base class for all treegrid errors."""


class InvalidPathError(TreeGridError, ValueError):
    """A row path or row id does not resolve to a node in the forest."""


class CyclicMoveError(InvalidPathError):
    """A row was asked to move into its own subtree."""


class PreconditionError(TreeGridError, ValueError):
    """A caller broke an input contract (empty selection, empty grid, ...)."""
