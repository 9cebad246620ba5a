"""Utility functions."""

from .array_move import array_move
from .ids import new_id

__all__ = [
    "array_move",
    "new_id",
]
