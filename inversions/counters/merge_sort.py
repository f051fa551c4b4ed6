"""
Merge Sort Inversion Counter
============================
Classic top-down merge sort that counts inversions while sorting a
sequence range in place.

Non-adaptive baseline for the natural merge-sort counter: every range
is split down to single elements regardless of existing order. A
scratch copy of the range and the caller's range trade source/target
roles at every recursion level, so no per-level copying is needed.
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Optional

from inversions.counters.merge_engine import merge_runs
from inversions.validators import resolve_range

Comparator = Callable[[Any, Any], int]


def count(
    sequence: MutableSequence[Any],
    from_index: int = 0,
    to_index: Optional[int] = None,
    comparator: Optional[Comparator] = None,
) -> int:
    """
    Return the number of inversions in ``sequence[from_index:to_index]``
    and leave that range stably sorted.
    """
    from_index, to_index, comparator = resolve_range(
        sequence, from_index, to_index, comparator
    )
    range_length = to_index - from_index
    if range_length < 2:
        return 0

    scratch: List[Any] = [sequence[i] for i in range(from_index, to_index)]
    return _count(scratch, sequence, 0, from_index, range_length, comparator)


def _count(
    source: MutableSequence[Any],
    target: MutableSequence[Any],
    source_offset: int,
    target_offset: int,
    range_length: int,
    comparator: Comparator,
) -> int:
    """
    Sort ``source[source_offset:+range_length]`` into *target* at
    *target_offset*. Both buffers hold the same elements on entry.
    """
    if range_length < 2:
        return 0

    half = range_length // 2
    # Sort each half into `source` (roles swapped) so it can be merged
    # from there into `target`.
    inversions = _count(target, source, target_offset, source_offset,
                        half, comparator)
    inversions += _count(target, source,
                         target_offset + half, source_offset + half,
                         range_length - half, comparator)

    return inversions + merge_runs(source, target,
                                   source_offset, target_offset,
                                   half, range_length - half,
                                   comparator)
