"""
LinkedList demonstration example.

Demonstrates:
- Positional insert, set and get
- Copy construction and copy assignment (assign)
- append/prepend at both ends
- Iteration with has_next/next and with a for loop
- Construction from an arbitrary iterable
"""

from __future__ import annotations

from pylinked import InvalidIndexError, LinkedList


def demo_basic() -> None:
    """Build a list, copy it, and mutate the copies independently."""
    print("=" * 60)
    print("BASIC OPERATIONS")
    print("=" * 60)
    print()

    xs: LinkedList[int] = LinkedList()
    print(xs)

    for i in range(10):
        xs.insert(i, 10 * i)

    xs1 = LinkedList(xs)

    xs.prepend(-1)
    xs.append(1000)
    xs.set(2, 11)

    xs1.append(100)

    xs2: LinkedList[int] = LinkedList()
    xs2.assign(xs1)
    xs2.append(200)
    xs2.set(1, 12)

    print(xs)
    print(xs1)
    print(xs2)
    print()

    for i in range(xs.size()):
        print(f"Elem at {i} is {xs.get(i)}")
    print()


def demo_iteration() -> None:
    """Walk a list with the explicit cursor and with for."""
    print("=" * 60)
    print("ITERATION")
    print("=" * 60)
    print()

    xs = LinkedList([1, 2, 3, 5])
    xs[2] = 300

    it = xs.iterator()
    while it.has_next():
        print(it.next(), end=" ")
    print()

    for x in xs:
        print(x, end=" ")
    print()
    print()


def demo_errors() -> None:
    """Out-of-range positions raise InvalidIndexError."""
    print("=" * 60)
    print("INVALID INDEX")
    print("=" * 60)
    print()

    xs = LinkedList([0, 9, 2])
    try:
        xs.get(5)
    except InvalidIndexError as e:
        print(f"get(5): {e}")
    print(f"List unchanged: {xs}")
    print()


def main() -> None:
    demo_basic()
    demo_iteration()
    demo_errors()


if __name__ == "__main__":
    main()
