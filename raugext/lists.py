"""Indexing into list signals."""

from __future__ import annotations

from typing import Sequence, TypeVar

from .env import ProcessorError

__all__ = ["ListError", "get"]

T = TypeVar("T")

_USIZE = 2**64


class ListError(ProcessorError, IndexError):
    """Raised when a list index is out of bounds."""

    def __init__(self, index: int) -> None:
        self.index = index % _USIZE
        super().__init__(f"Index out of bounds: {self.index}")


def get(items: Sequence[T], index: int) -> T:
    """Return ``items[index]``; negative or too large indices raise ListError."""
    if index < 0 or index >= len(items):
        raise ListError(index)
    return items[index]