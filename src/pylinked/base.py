"""
List - abstract indexable sequence.

Declares the operations every list container provides and maps the
Python sequence protocol (len, iter, [], del, in, ==) onto them.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


def _as_index(key: Any) -> int:
    """Accept plain integers only: no slices, no bools."""
    if isinstance(key, bool):
        raise TypeError("list indices must be integers, not bool")
    try:
        return operator.index(key)
    except TypeError:
        raise TypeError(
            f"list indices must be integers, not {type(key).__name__}"
        ) from None


class List(ABC, Generic[T]):
    """
    Mutable sequence with positional access.

    Valid indices are 0 <= i < size() for get/set/remove and
    0 <= i <= size() for insert. Negative indices are not wrapped.
    """

    @abstractmethod
    def size(self) -> int:
        """Number of elements."""
        ...

    @abstractmethod
    def is_empty(self) -> bool:
        """True if the list holds no elements."""
        ...

    @abstractmethod
    def get(self, i: int) -> T:
        """Return element at position i."""
        ...

    @abstractmethod
    def set(self, i: int, x: T) -> None:
        """Replace element at position i."""
        ...

    @abstractmethod
    def insert(self, i: int, x: T) -> None:
        """Insert x so that it ends up at position i."""
        ...

    @abstractmethod
    def remove(self, i: int) -> None:
        """Remove element at position i."""
        ...

    @abstractmethod
    def append(self, x: T) -> None:
        """Add x as new last element."""
        ...

    @abstractmethod
    def prepend(self, x: T) -> None:
        """Add x as new first element."""
        ...

    @abstractmethod
    def iterator(self) -> Iterator[T]:
        """Return a forward iteration view over the elements."""
        ...

    def __len__(self) -> int:
        """Python-style length."""
        return self.size()

    def __iter__(self) -> Iterator[T]:
        """Iterate over elements from first to last."""
        return self.iterator()

    def __getitem__(self, key: int) -> T:
        """xs[i] equivalent of get(i)."""
        return self.get(_as_index(key))

    def __setitem__(self, key: int, value: T) -> None:
        """xs[i] = x equivalent of set(i, x)."""
        self.set(_as_index(key), value)

    def __delitem__(self, key: int) -> None:
        """del xs[i] equivalent of remove(i)."""
        self.remove(_as_index(key))

    def __contains__(self, value: object) -> bool:
        """Linear search by identity or equality."""
        for x in self:
            if x is value or x == value:
                return True
        return False

    def __eq__(self, other: object) -> bool:
        """Element-wise comparison with any other List."""
        if not isinstance(other, List):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(a == b for a, b in zip(self, other))

    # Mutable and compared by value.
    __hash__ = None  # type: ignore[assignment]

    def to_list(self) -> list[T]:
        """Snapshot of the elements as a built-in list."""
        return [x for x in self]
