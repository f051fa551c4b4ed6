"""
Counter Interface
=================
Common call shape of every inversion counter and the registry the
benchmark and tests iterate over.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, MutableSequence, Optional, Protocol

from inversions.counters import brute_force, merge_sort, natural_merge_sort


class InversionCounter(Protocol):
    def __call__(
        self,
        sequence: MutableSequence[Any],
        from_index: int = 0,
        to_index: Optional[int] = None,
        comparator: Optional[Callable[[Any, Any], int]] = None,
    ) -> int:
        ...


COUNTERS: Dict[str, InversionCounter] = {
    "natural": natural_merge_sort.count,
    "mergesort": merge_sort.count,
    "brute_force": brute_force.count,
}

# Counters that sort the addressed range as a side effect.
SORTING_COUNTERS = ("natural", "mergesort")


def get_counter(name: str) -> InversionCounter:
    try:
        return COUNTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown counter {name!r}; expected one of {', '.join(COUNTERS)}"
        ) from None
