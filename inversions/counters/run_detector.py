"""
Run Detector
============
Single left-to-right scan that splits a range into runs for the natural
merge sort.

- Ascending runs are non-decreasing (`<=`), descending runs are strictly
  decreasing. Reversing a strictly decreasing run can never swap two
  equal elements, so the scan keeps the sort stable.
- Descending runs are reversed in place as soon as they are closed. Every
  pair inside a strictly descending run is an inversion, so a run of k
  elements contributes k * (k - 1) // 2 that no later merge will see.
- A run closed right after a reversed descending run is folded into it
  when the two join up in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, MutableSequence, Tuple

from inversions.counters.run_length_queue import RunLengthQueue

Comparator = Callable[[Any, Any], int]


class ScanPhase(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass
class RunScanState:
    """Cursor state threaded through the scan loop."""
    head: int                          # first index of the run being scanned
    left: int                          # last index known to belong to the run
    previous_descending: bool = False  # last closed run was reversed
    previous_last: int = -1            # index of the last element of that run
    inversions: int = 0                # pairs removed by reversals so far


def build_run_length_queue(
    sequence: MutableSequence[Any],
    from_index: int,
    to_index: int,
    comparator: Comparator,
    min_capacity: int | None = None,
) -> Tuple[RunLengthQueue, int]:
    """
    Scan ``sequence[from_index:to_index]`` and return the queue of its run
    lengths together with the number of inversions undone by reversing
    descending runs. The range must hold at least two elements.

    On return every run in the range is non-decreasing; the lengths sum to
    ``to_index - from_index``.
    """
    last = to_index - 1
    queue = RunLengthQueue.for_range(to_index - from_index, min_capacity)
    state = RunScanState(head=from_index, left=from_index)

    while state.left < last:
        state.head = state.left
        phase = _classify(sequence, state.left, comparator)
        state.left += 1

        if phase is ScanPhase.ASCENDING:
            while state.left < last and comparator(sequence[state.left],
                                                   sequence[state.left + 1]) <= 0:
                state.left += 1
        else:
            while state.left < last and comparator(sequence[state.left],
                                                   sequence[state.left + 1]) > 0:
                state.left += 1
            reverse_range(sequence, state.head, state.left)
            run_length = state.left - state.head + 1
            state.inversions += run_length * (run_length - 1) // 2

        _close_run(sequence, queue, state, comparator,
                    descending=phase is ScanPhase.DESCENDING)
        state.left += 1

    if state.left == last:
        # Trailing element that no pair comparison claimed.
        state.head = last
        _close_run(sequence, queue, state, comparator, descending=False)

    return queue, state.inversions


def _classify(sequence, left, comparator) -> ScanPhase:
    if comparator(sequence[left], sequence[left + 1]) <= 0:
        return ScanPhase.ASCENDING
    return ScanPhase.DESCENDING


def _close_run(sequence, queue, state, comparator, descending):
    """
    Enqueue the run [state.head, state.left], or fold it into the previous
    run when that one was reversed and still ends in order with this one.
    """
    run_length = state.left - state.head + 1

    if (state.previous_descending
            and comparator(sequence[state.previous_last], sequence[state.head]) <= 0):
        queue.extend_last_run(run_length)
    else:
        queue.enqueue(run_length)

    state.previous_descending = descending
    state.previous_last = state.left


def reverse_range(sequence: MutableSequence[Any], first: int, last: int) -> None:
    """Reverse ``sequence[first..last]`` (inclusive) in place."""
    while first < last:
        sequence[first], sequence[last] = sequence[last], sequence[first]
        first += 1
        last -= 1
