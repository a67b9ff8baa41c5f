"""Keyboard navigation over the logical grid."""

from .resolver import nearest_visible_row, translate_cell

__all__ = ["nearest_visible_row", "translate_cell"]
