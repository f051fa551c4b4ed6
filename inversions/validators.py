"""
Range Validators
================
Functions to validate counter arguments and check the state of a
sequence range after sorting.
"""

import operator

from inversions.counters.counter_errors import NullArgumentError, RangeIndexError


def natural_order(a, b):
    """
    Three-way comparison using only `<`.
    Returns: negative, zero or positive.
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def require_not_none(value, name):
    if value is None:
        raise NullArgumentError(name)
    return value


def resolve_comparator(comparator):
    """
    None selects natural ordering. Anything else must be callable.
    """
    if comparator is None:
        return natural_order
    if not callable(comparator):
        raise NullArgumentError(
            "comparator", f"comparator must be callable, got {type(comparator).__name__}"
        )
    return comparator


def check_indices(length, from_index, to_index):
    """
    Validate a half-open range [from_index, to_index) against `length`.
    Raises RangeIndexError naming the offending bound.
    """
    if from_index < 0:
        raise RangeIndexError(
            f"from_index({from_index}) < 0",
            bound="from_index", value=from_index, length=length,
        )

    if to_index > length:
        raise RangeIndexError(
            f"to_index({to_index}) > length({length})",
            bound="to_index", value=to_index, length=length,
        )

    if from_index > to_index:
        raise RangeIndexError(
            f"from_index({from_index}) > to_index({to_index})",
            bound="from_index", value=from_index, length=length,
        )


def resolve_range(sequence, from_index=0, to_index=None, comparator=None):
    """
    Validate all counter arguments before anything is touched.
    Returns: (from_index, to_index, comparator)
    """
    require_not_none(sequence, "sequence")
    length = len(sequence)
    from_index = operator.index(from_index)
    to_index = length if to_index is None else operator.index(to_index)
    comparator = resolve_comparator(comparator)
    check_indices(length, from_index, to_index)
    return from_index, to_index, comparator


def is_sorted(sequence, from_index=0, to_index=None, comparator=None):
    """
    Check that the range is non-decreasing under `comparator`.
    """
    from_index, to_index, comparator = resolve_range(
        sequence, from_index, to_index, comparator
    )
    for i in range(from_index + 1, to_index):
        if comparator(sequence[i - 1], sequence[i]) > 0:
            return False
    return True


def is_stable_permutation(before, after, comparator=None):
    """
    Check that `after` is a permutation of `before` (by identity) in which
    elements comparing equal kept their original relative order.
    """
    comparator = resolve_comparator(comparator)
    if len(before) != len(after):
        return False

    original_position = {}
    for position, element in enumerate(before):
        original_position.setdefault(id(element), []).append(position)

    # Interned objects (small ints, short strings) share an id; hand out
    # their positions in order.
    positions = []
    for element in after:
        slots = original_position.get(id(element))
        if not slots:
            return False
        positions.append(slots.pop(0))

    for i in range(1, len(after)):
        if comparator(after[i - 1], after[i]) == 0 and positions[i - 1] > positions[i]:
            return False
    return True
