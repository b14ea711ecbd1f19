"""
LinkedList - singly-linked list with references to both ends.

The chain is owned through the head: each node holds the rest of the
chain in ``next``. ``_last`` is a plain back-reference to the tail kept
only so that append is O(1).

Invariants after every public call:
- ``_size == 0`` iff ``_first is None`` iff ``_last is None``.
- ``_last`` is the node reached by following ``next`` ``_size - 1``
  times from ``_first``, and ``_last.next is None``.
"""

from __future__ import annotations

import copy
from typing import Generic, Iterable, Iterator, TypeVar

from pylinked.base import List
from pylinked.errors import InvalidIndexError

T = TypeVar("T")

_CHAIN_FIELDS = ("_first", "_last", "_size")


class _Node(Generic[T]):
    """One element plus the link to its successor."""

    __slots__ = ("element", "next")

    def __init__(self, element: T, next: _Node[T] | None = None) -> None:
        self.element = element
        self.next = next


def _chain(iterable: Iterable[T]) -> tuple[_Node[T] | None, _Node[T] | None, int]:
    """
    Build a detached chain from iterable in a single pass.

    Returns (first, last, size). Nothing is installed anywhere, so a
    failure while consuming iterable leaves no partial state behind.
    """
    first: _Node[T] | None = None
    last: _Node[T] | None = None
    size = 0
    for x in iterable:
        node = _Node(x)
        if last is None:
            first = node
        else:
            last.next = node
        last = node
        size += 1
    return first, last, size


class LinkedListIterator(Generic[T]):
    """
    Forward, non-restartable cursor over a LinkedList.

    Holds only the node to be produced next. Mutating the list while
    the cursor is in use gives unspecified results.
    """

    __slots__ = ("_current",)

    def __init__(self, first: _Node[T] | None) -> None:
        self._current = first

    def has_next(self) -> bool:
        """True if another element remains."""
        return self._current is not None

    def next(self) -> T:
        """Return current element and advance; StopIteration when exhausted."""
        return self.__next__()

    def __next__(self) -> T:
        node = self._current
        if node is None:
            raise StopIteration
        self._current = node.next
        return node.element

    def __iter__(self) -> LinkedListIterator[T]:
        return self


class LinkedList(List[T]):
    """
    List implemented as a singly-linked chain of nodes.

    Complexity:
        size, is_empty, append, prepend, swap: O(1)
        get, set, insert, remove: O(i)
        copy, construction from iterable, str: O(n)
    """

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        self._first: _Node[T] | None = None
        self._last: _Node[T] | None = None
        self._size = 0
        if iterable is not None:
            self._first, self._last, self._size = _chain(iterable)

    def _validate_index(self, i: int) -> None:
        if i < 0 or i >= self._size:
            raise InvalidIndexError(i, self._size)

    def _node_at(self, i: int) -> _Node[T]:
        # Pre: 0 <= i < size
        node = self._first
        for _ in range(i):
            node = node.next
        return node

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._first
        while node is not None:
            yield node
            node = node.next

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def get(self, i: int) -> T:
        self._validate_index(i)
        return self._node_at(i).element

    def set(self, i: int, x: T) -> None:
        self._validate_index(i)
        self._node_at(i).element = x

    def insert(self, i: int, x: T) -> None:
        """
        Insert x at position i, shifting later elements right.

        Accepts 0 <= i <= size(). Inserting at size() appends and
        inserting at 0 prepends, both without traversal.
        """
        if i < 0 or i > self._size:
            raise InvalidIndexError(i, self._size)

        if i == self._size:
            self.append(x)
        elif i == 0:
            self.prepend(x)
        else:
            prev = self._node_at(i - 1)
            prev.next = _Node(x, prev.next)
            self._size += 1

    def remove(self, i: int) -> None:
        """Remove element at position i, shifting later elements left."""
        self._validate_index(i)

        if i == 0:
            self._first = self._first.next
            if self._first is None:
                self._last = None
        else:
            prev = self._node_at(i - 1)
            prev.next = prev.next.next
            if i == self._size - 1:
                self._last = prev
        self._size -= 1

    def append(self, x: T) -> None:
        node = _Node(x)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1

    def prepend(self, x: T) -> None:
        self._first = _Node(x, self._first)
        if self._last is None:
            self._last = self._first
        self._size += 1

    def extend(self, iterable: Iterable[T]) -> None:
        """
        Append every element of iterable, in order.

        The new nodes are linked on only after iterable is fully
        consumed, so extending a list with itself doubles it.
        """
        first, last, size = _chain(iterable)
        if first is None:
            return
        if self._last is None:
            self._first = first
        else:
            self._last.next = first
        self._last = last
        self._size += size

    def clear(self) -> None:
        """Drop every element."""
        self._first = None
        self._last = None
        self._size = 0

    def swap(self, other: LinkedList[T]) -> None:
        """Exchange contents with other in constant time."""
        if not isinstance(other, LinkedList):
            raise TypeError(f"cannot swap with {type(other).__name__}")
        self._first, other._first = other._first, self._first
        self._last, other._last = other._last, self._last
        self._size, other._size = other._size, self._size

    def assign(self, other: LinkedList[T]) -> None:
        """Replace contents with a copy of other."""
        if other is self:
            return
        self._first, self._last, self._size = _chain(other)

    def copy(self) -> LinkedList[T]:
        """
        Independent copy sharing no nodes with this list.

        The elements themselves are not copied. Built without calling
        __init__, so subclasses with other constructors keep their
        contents and attributes.
        """
        cls = type(self)
        result = cls.__new__(cls)
        result.__dict__.update(self.__dict__)
        result._first, result._last, result._size = _chain(self)
        return result

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> LinkedList[T]:
        # Walks the chain iteratively; the default would recurse once per node.
        cls = type(self)
        result = cls.__new__(cls)
        memo[id(self)] = result
        for name, value in self.__dict__.items():
            if name not in _CHAIN_FIELDS:
                result.__dict__[name] = copy.deepcopy(value, memo)
        result._first, result._last, result._size = _chain(
            copy.deepcopy(x, memo) for x in self
        )
        return result

    def iterator(self) -> LinkedListIterator[T]:
        return LinkedListIterator(self._first)

    def __str__(self) -> str:
        body = ",".join(str(node.element) for node in self._nodes())
        return f"{type(self).__name__}({body})"

    def __repr__(self) -> str:
        body = ",".join(repr(node.element) for node in self._nodes())
        return f"{type(self).__name__}({body})"
