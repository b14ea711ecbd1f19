"""
Exceptions raised by list containers.
"""

from __future__ import annotations


class ListError(Exception):
    """
    Base class for list container errors.

    Exhausting an iteration view raises the built-in StopIteration,
    which is not a ListError.
    """


class InvalidIndexError(ListError, IndexError):
    """
    Index outside the range accepted by an operation.

    Raised before any mutation, so the list is left unchanged.
    """

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Invalid position {index}")
        self.index = index
        self.size = size
