"""
PyLinked - singly-linked list container.

A LinkedList with head and tail references: O(1) append and prepend,
positional get/set/insert/remove, forward iteration and deep copy.
"""

from pylinked.base import List
from pylinked.errors import InvalidIndexError, ListError
from pylinked.linked_list import LinkedList, LinkedListIterator

__version__ = "0.1.0"
__all__ = [
    # Contract
    "List",
    # Implementation
    "LinkedList",
    "LinkedListIterator",
    # Errors
    "ListError",
    "InvalidIndexError",
]
