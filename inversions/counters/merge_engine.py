"""
Merge Engine
============
Stable two-run merge that counts the inversions crossing the runs.
Shared by the natural and the classic merge-sort counters.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Sequence

Comparator = Callable[[Any, Any], int]


def merge_runs(
    source: Sequence[Any],
    target: MutableSequence[Any],
    source_offset: int,
    target_offset: int,
    left_run_length: int,
    right_run_length: int,
    comparator: Comparator,
) -> int:
    """
    Merge the adjacent sorted runs
    ``source[source_offset : source_offset + left_run_length]`` and the
    ``right_run_length`` elements after it into *target* starting at
    *target_offset*.

    Returns
    -------
    int
        Number of pairs (x from the left run, y from the right run) with
        x > y under *comparator*.
    """
    left_index = source_offset
    left_end = source_offset + left_run_length
    right_index = left_end
    right_end = right_index + right_run_length
    target_index = target_offset
    inversions = 0

    while left_index != left_end and right_index != right_end:
        if comparator(source[right_index], source[left_index]) < 0:
            # Jumps ahead of everything still waiting in the left run.
            inversions += left_end - left_index
            target[target_index] = source[right_index]
            right_index += 1
        else:
            # Ties take the left element: equal elements never cross.
            target[target_index] = source[left_index]
            left_index += 1
        target_index += 1

    copy_range(source, left_index, target, target_index, left_end - left_index)
    target_index += left_end - left_index
    copy_range(source, right_index, target, target_index, right_end - right_index)
    return inversions


def copy_range(
    source: Sequence[Any],
    source_offset: int,
    target: MutableSequence[Any],
    target_offset: int,
    length: int,
) -> None:
    """Element-wise copy; *source* and *target* must be distinct buffers."""
    for i in range(length):
        target[target_offset + i] = source[source_offset + i]
