"""
Natural Merge Sort Inversion Counter
====================================
Counts the inversions in a sequence range while stably sorting that
range in place.

Pipeline:
- run_detector splits the range into non-decreasing runs (reversing
  strictly descending ones) and returns their lengths in a queue
- reversing a strictly descending run undoes all of its k * (k - 1) // 2
  inversions, which the detector counts
- merge passes pair the runs up oldest-first, ping-ponging between the
  caller's range and one scratch buffer, and sum the inversions each
  merge reports

The number of passes is known once the runs are detected, so the
starting buffer is chosen up front such that the last pass writes into
the caller's range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, MutableSequence, Optional

from inversions.counters.counter_errors import resolve_debug_mode
from inversions.counters.merge_engine import copy_range, merge_runs
from inversions.counters.run_detector import build_run_length_queue
from inversions.validators import resolve_range

DEBUG_MODE = resolve_debug_mode()

CALLER = 0
SCRATCH = 1


@dataclass(frozen=True)
class InversionReport:
    """Outcome of one natural merge-sort count."""
    inversions: int
    range_length: int
    initial_runs: int     # runs found by the detector (after folding)
    merge_passes: int     # ceil(log2(initial_runs))


def merge_pass_count(runs: int) -> int:
    """Merge passes needed to reduce *runs* runs to one."""
    return (runs - 1).bit_length() if runs > 1 else 0


def count(
    sequence: MutableSequence[Any],
    from_index: int = 0,
    to_index: Optional[int] = None,
    comparator: Optional[Callable[[Any, Any], int]] = None,
) -> int:
    """
    Return the number of inversions in ``sequence[from_index:to_index]``
    and leave that range stably sorted.

    Parameters
    ----------
    sequence : mutable sequence
        Sorted in place over the addressed range. Copy it first if the
        original order matters.
    from_index, to_index : int, optional
        Half-open range; defaults to the whole sequence.
    comparator : callable, optional
        ``comparator(a, b) -> int`` (negative, zero, positive). Natural
        ordering when omitted.
    """
    return count_with_report(sequence, from_index, to_index, comparator).inversions


def count_with_report(
    sequence: MutableSequence[Any],
    from_index: int = 0,
    to_index: Optional[int] = None,
    comparator: Optional[Callable[[Any, Any], int]] = None,
) -> InversionReport:
    """Same as :func:`count`, also reporting the run structure found."""
    from_index, to_index, comparator = resolve_range(
        sequence, from_index, to_index, comparator
    )
    range_length = to_index - from_index

    if range_length < 2:
        return InversionReport(0, range_length, range_length, 0)

    run_queue, inversions = build_run_length_queue(
        sequence, from_index, to_index, comparator
    )
    initial_runs = run_queue.size()
    merge_passes = merge_pass_count(initial_runs)

    scratch = [sequence[i] for i in range(from_index, to_index)]
    buffers = (sequence, scratch)
    offsets = (from_index, 0)

    # After an odd number of passes the roles have flipped, so start from
    # the scratch copy in that case.
    source = SCRATCH if merge_passes & 1 else CALLER

    if DEBUG_MODE:
        print(f"[NMS DEBUG] range=[{from_index}, {to_index}) "
              f"runs={initial_runs} passes={merge_passes} start={'scratch' if source else 'caller'}")

    runs_left_in_pass = run_queue.size()
    offset = 0
    pass_number = 1

    while run_queue.size() > 1:
        target = 1 - source
        left_run_length = run_queue.dequeue()
        right_run_length = run_queue.dequeue()

        inversions += merge_runs(buffers[source],
                                 buffers[target],
                                 offsets[source] + offset,
                                 offsets[target] + offset,
                                 left_run_length,
                                 right_run_length,
                                 comparator)

        merged_length = left_run_length + right_run_length
        run_queue.enqueue(merged_length)
        runs_left_in_pass -= 2
        offset += merged_length

        if runs_left_in_pass == 1:
            # Odd run out: carry it over to the next pass untouched.
            last_run_length = run_queue.dequeue()
            copy_range(buffers[source],
                       offsets[source] + offset,
                       buffers[target],
                       offsets[target] + offset,
                       last_run_length)
            run_queue.enqueue(last_run_length)
            runs_left_in_pass = 0

        if runs_left_in_pass == 0:
            if DEBUG_MODE:
                print(f"[NMS DEBUG] pass {pass_number}: runs={run_queue.size()} "
                      f"inversions={inversions}")
            runs_left_in_pass = run_queue.size()
            offset = 0
            source = target
            pass_number += 1

    return InversionReport(inversions, range_length, initial_runs, merge_passes)
