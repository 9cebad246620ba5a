"""Stable reordering of sequences."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def array_move(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """
    Return a new list with the item at from_index relocated to to_index.

    The item is removed and reinserted, so every other item keeps its
    relative order. Indices outside the sequence leave the copy unchanged.

    Example: array_move(["x", "y", "z"], 1, 0) -> ["y", "x", "z"]
    """
    result = list(items)
    size = len(result)
    if not (0 <= from_index < size and 0 <= to_index < size):
        return result
    result.insert(to_index, result.pop(from_index))
    return result
