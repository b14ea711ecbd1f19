"""
Pytest configuration and fixtures for PyLinked tests.
"""

from typing import Callable

import pytest
import simpy

from pylinked import LinkedList


def assert_invariants(xs: LinkedList) -> None:
    """
    Walk the chain and check head/tail/size consistency.

    Args:
        xs: List to check
    """
    assert xs.is_empty() == (xs.size() == 0)

    if xs.size() == 0:
        assert xs._first is None
        assert xs._last is None
        return

    assert xs._first is not None
    assert xs._last is not None
    assert xs._last.next is None

    count = 0
    node = xs._first
    tail = None
    while node is not None:
        count += 1
        tail = node
        node = node.next

    assert count == xs.size(), f"Chain has {count} nodes, size is {xs.size()}"
    assert tail is xs._last, "Tail reference out of sync with chain"


@pytest.fixture
def check_invariants() -> Callable[[LinkedList], None]:
    """Structural invariant checker."""
    return assert_invariants


@pytest.fixture
def env() -> simpy.Environment:
    """Create a fresh SimPy environment."""
    return simpy.Environment()


@pytest.fixture
def empty() -> LinkedList:
    """A fresh empty list."""
    return LinkedList()


@pytest.fixture
def numbers() -> LinkedList:
    """List holding 0..4."""
    return LinkedList(range(5))
