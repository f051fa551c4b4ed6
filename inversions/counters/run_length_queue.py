"""
Run Length Queue
================
Fixed-capacity ring buffer of run lengths for the natural merge sort.

Runs are consumed left to right, so only their lengths are stored; a
run's position is the running sum of the lengths dequeued before it in
the current merge pass.
"""

from __future__ import annotations

from typing import List

from inversions.counters.counter_errors import (
    RunQueueInvariantError,
    resolve_min_queue_capacity,
)


def ceil_power_of_two(number: int) -> int:
    """Smallest power of two no less than *number* (1 for number <= 1)."""
    if number <= 1:
        return 1
    return 1 << (number - 1).bit_length()


def required_capacity(range_length: int) -> int:
    """
    Number of slots that can never be exceeded while sorting a range of
    *range_length* elements.

    Every run the detector closes inside the range spans at least two
    elements, so only a trailing run can have length 1 and there are at
    most ceil(n / 2) initial runs. Merge passes never grow the queue.
    """
    return (range_length + 1) // 2 + 1


class RunLengthQueue:
    """
    Circular queue of positive run lengths with O(1) enqueue, dequeue and
    extension of the most recently enqueued run.

    Indices wrap with a bitmask, so the backing capacity is always a power
    of two.
    """

    __slots__ = ("_storage", "_mask", "_head", "_tail", "_size")

    def __init__(self, capacity: int, min_capacity: int | None = None):
        capacity = max(capacity, resolve_min_queue_capacity(min_capacity))
        capacity = ceil_power_of_two(capacity)
        self._storage: List[int] = [0] * capacity
        self._mask = capacity - 1
        self._head = 0
        self._tail = 0
        self._size = 0

    @classmethod
    def for_range(cls, range_length: int, min_capacity: int | None = None) -> "RunLengthQueue":
        return cls(required_capacity(range_length), min_capacity)

    @property
    def capacity(self) -> int:
        return self._mask + 1

    def enqueue(self, run_length: int) -> None:
        """Append *run_length* at the tail."""
        if self._size == self.capacity:
            raise RunQueueInvariantError(
                "Run-length queue overflow.",
                capacity=self.capacity, size=self._size, context="enqueue",
            )
        self._storage[self._tail] = run_length
        self._tail = (self._tail + 1) & self._mask
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the oldest run length."""
        if self._size == 0:
            raise RunQueueInvariantError(
                "Dequeue from an empty run-length queue.",
                capacity=self.capacity, size=0, context="dequeue",
            )
        run_length = self._storage[self._head]
        self._head = (self._head + 1) & self._mask
        self._size -= 1
        return run_length

    def extend_last_run(self, delta: int) -> None:
        """Add *delta* to the most recently enqueued run length."""
        if self._size == 0:
            raise RunQueueInvariantError(
                "No run to extend in an empty run-length queue.",
                capacity=self.capacity, size=0, context="extend_last_run",
            )
        self._storage[(self._tail - 1) & self._mask] += delta

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        """Pending run lengths, oldest first. Does not consume them."""
        for i in range(self._size):
            yield self._storage[(self._head + i) & self._mask]

    def __repr__(self) -> str:
        return f"RunLengthQueue({list(self)!r}, capacity={self.capacity})"
