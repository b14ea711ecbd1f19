"""
Producer-Consumer over a bounded LinkedList buffer.

Demonstrates:
- LinkedList as a FIFO queue (append at the tail, get/remove at the head)
- LinkedList as a wait list of SimPy events
- Exponential inter-arrival times from a seeded random.Random

Producer blocks while the buffer is full, consumer blocks while it is
empty. Run for 10000 time units and print the counts.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

import simpy

from pylinked import LinkedList


@dataclass
class Job:
    """Job tagged with its id and creation time."""

    id: int
    created: float


class JobBuffer:
    """Bounded FIFO of jobs with SimPy wait lists for full/empty."""

    def __init__(self, env: simpy.Environment, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._env = env
        self._capacity = capacity
        self._jobs: LinkedList[Job] = LinkedList()
        self._waiting_producers: LinkedList[simpy.Event] = LinkedList()
        self._waiting_consumers: LinkedList[simpy.Event] = LinkedList()

    @property
    def jobs(self) -> LinkedList[Job]:
        return self._jobs

    def is_empty(self) -> bool:
        return self._jobs.is_empty()

    def is_full(self) -> bool:
        return self._jobs.size() >= self._capacity

    def enqueue(self, job: Job) -> None:
        self._jobs.append(job)
        self._wake(self._waiting_consumers)

    def dequeue(self) -> Job:
        job = self._jobs.get(0)
        self._jobs.remove(0)
        self._wake(self._waiting_producers)
        return job

    def wait_not_full(self) -> simpy.Event:
        event = self._env.event()
        self._waiting_producers.append(event)
        return event

    def wait_not_empty(self) -> simpy.Event:
        event = self._env.event()
        self._waiting_consumers.append(event)
        return event

    @staticmethod
    def _wake(waiters: LinkedList[simpy.Event]) -> None:
        while not waiters.is_empty():
            event = waiters.get(0)
            waiters.remove(0)
            event.succeed()


@dataclass
class JobBufferResult:
    produced: int
    consumed: int
    remaining: LinkedList[Job]


def producer(env: simpy.Environment, buffer: JobBuffer, rng: random.Random, mean: float, stats: dict):
    """Create a job, wait for room, enqueue it, then sleep."""
    next_id = 0
    while True:
        job = Job(next_id, env.now)
        next_id += 1

        # Block while buffer is full
        while buffer.is_full():
            yield buffer.wait_not_full()

        buffer.enqueue(job)
        stats["produced"] += 1

        yield env.timeout(rng.expovariate(1.0 / mean))


def consumer(env: simpy.Environment, buffer: JobBuffer, rng: random.Random, mean: float, stats: dict):
    """Wait for a job, dequeue it, then sleep."""
    while True:
        # Block while buffer is empty
        while buffer.is_empty():
            yield buffer.wait_not_empty()

        buffer.dequeue()
        stats["consumed"] += 1

        yield env.timeout(rng.expovariate(1.0 / mean))


def run(
    until: float = 10000.0,
    seed: int = 1,
    capacity: int = 10,
    producer_mean: float = 10.0,
    consumer_mean: float = 10.0,
) -> JobBufferResult:
    """Run the simulation and return job counts plus the leftover buffer."""
    rng = random.Random(seed)
    env = simpy.Environment()
    buffer = JobBuffer(env, capacity)
    stats = {"produced": 0, "consumed": 0}

    env.process(producer(env, buffer, rng, producer_mean, stats))
    env.process(consumer(env, buffer, rng, consumer_mean, stats))
    env.run(until=until)

    return JobBufferResult(stats["produced"], stats["consumed"], buffer.jobs)


def main() -> None:
    result = run()
    print(f"Total number of jobs present {result.produced}")
    print(f"Total number of jobs processed {result.consumed}")
    print(f"Jobs left in buffer {result.remaining.size()}")


if __name__ == "__main__":
    main()
