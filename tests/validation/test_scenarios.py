"""
Scenario tests for LinkedList.

Replays a fixed sequence of operations and compares each step with a
built-in list driven by the same operations.

Expected sequence:
    append(1), append(2), prepend(0) -> LinkedList(0,1,2)
    remove(1)                        -> LinkedList(0,2)
    insert(1, 9)                     -> LinkedList(0,9,2)
    get(5)                           -> InvalidIndexError
"""

import random

import pytest

from pylinked import InvalidIndexError, LinkedList


class TestScenario:
    """Test the documented operation sequence."""

    def test_sequence(self, check_invariants) -> None:
        xs = LinkedList()
        xs.append(1)
        xs.append(2)
        xs.prepend(0)
        assert str(xs) == "LinkedList(0,1,2)"
        assert xs.size() == 3

        xs.remove(1)
        assert xs.to_list() == [0, 2]
        assert xs.size() == 2

        xs.insert(1, 9)
        assert xs.to_list() == [0, 9, 2]

        with pytest.raises(InvalidIndexError):
            xs.get(5)
        assert xs.to_list() == [0, 9, 2]
        check_invariants(xs)

    def test_copy_then_diverge(self) -> None:
        """A copy and its source evolve independently."""
        xs = LinkedList()
        for i in range(10):
            xs.insert(i, 10 * i)

        xs1 = LinkedList(xs)

        xs.prepend(-1)
        xs.append(1000)
        xs.set(2, 11)

        xs1.append(100)

        xs2 = LinkedList()
        xs2.assign(xs1)
        xs2.append(200)
        xs2.set(1, 12)

        assert str(xs) == "LinkedList(-1,0,11,20,30,40,50,60,70,80,90,1000)"
        assert str(xs1) == "LinkedList(0,10,20,30,40,50,60,70,80,90,100)"
        assert str(xs2) == "LinkedList(0,12,20,30,40,50,60,70,80,90,100,200)"


class TestRandomOperations:
    """Drive LinkedList and a built-in list with the same random operations."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_matches_builtin_list(self, seed, check_invariants) -> None:
        rng = random.Random(seed)
        xs = LinkedList()
        model = []

        for step in range(500):
            op = rng.choice(["append", "prepend", "insert", "remove", "set"])
            if op == "append":
                xs.append(step)
                model.append(step)
            elif op == "prepend":
                xs.prepend(step)
                model.insert(0, step)
            elif op == "insert":
                i = rng.randint(0, len(model))
                xs.insert(i, step)
                model.insert(i, step)
            elif op == "remove":
                if not model:
                    with pytest.raises(InvalidIndexError):
                        xs.remove(0)
                    continue
                i = rng.randrange(len(model))
                xs.remove(i)
                del model[i]
            else:
                if not model:
                    continue
                i = rng.randrange(len(model))
                xs.set(i, -step)
                model[i] = -step

            assert xs.size() == len(model)
            check_invariants(xs)

        assert xs.to_list() == model
