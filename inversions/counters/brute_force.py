"""
Brute Force Inversion Counter
=============================
Quadratic pair scan. Used as the correctness oracle for the merge-sort
counters; it does not modify the sequence.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from inversions.validators import resolve_range


def count(
    sequence: Sequence[Any],
    from_index: int = 0,
    to_index: Optional[int] = None,
    comparator: Optional[Callable[[Any, Any], int]] = None,
) -> int:
    from_index, to_index, comparator = resolve_range(
        sequence, from_index, to_index, comparator
    )
    inversions = 0

    for i in range(from_index, to_index):
        for j in range(i + 1, to_index):
            if comparator(sequence[i], sequence[j]) > 0:
                inversions += 1

    return inversions
