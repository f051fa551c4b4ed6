"""
Counter errors and limits.
"""

from __future__ import annotations

import os

DEFAULT_MIN_QUEUE_CAPACITY = 16
RUN_QUEUE_INVARIANT_MESSAGE = "Run-length queue invariant violated."

_TRUTHY = {"1", "true", "yes", "on"}


class RangeIndexError(IndexError):
    """
    Raised when a from_index/to_index pair does not address a valid range.
    """

    def __init__(self, message: str, *, bound: str, value: int, length: int) -> None:
        super().__init__(message)
        self.bound = bound
        self.value = value
        self.length = length


class NullArgumentError(TypeError):
    """
    Raised when a required argument is missing (None) or unusable.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        super().__init__(message or f"{argument} must not be None")
        self.argument = argument


class RunQueueInvariantError(RuntimeError):
    """
    Raised when the run-length queue is driven outside its sizing bound.
    Reaching this means the run bookkeeping itself is broken.
    """

    def __init__(
        self,
        message: str = RUN_QUEUE_INVARIANT_MESSAGE,
        *,
        capacity: int | None = None,
        size: int | None = None,
        context: str | None = None,
    ) -> None:
        super().__init__(message)
        self.capacity = capacity
        self.size = size
        self.context = context


def resolve_debug_mode(explicit: bool | None = None) -> bool:
    """
    Resolve the debug flag.

    Priority:
    1) explicit argument
    2) env INVERSIONS_DEBUG
    3) False
    """
    if explicit is not None:
        return bool(explicit)
    raw = os.getenv("INVERSIONS_DEBUG")
    if raw is None:
        return False
    return raw.strip().lower() in _TRUTHY


def resolve_min_queue_capacity(explicit: int | None = None) -> int:
    """
    Resolve the minimum run-length queue capacity.

    Priority:
    1) explicit argument
    2) env INVERSIONS_MIN_QUEUE_CAPACITY
    3) DEFAULT_MIN_QUEUE_CAPACITY
    """
    raw = explicit
    if raw is None:
        raw = os.getenv("INVERSIONS_MIN_QUEUE_CAPACITY")
    if raw is None:
        return DEFAULT_MIN_QUEUE_CAPACITY

    try:
        capacity = int(raw)
        if capacity > 0:
            return capacity
    except (TypeError, ValueError):
        pass
    return DEFAULT_MIN_QUEUE_CAPACITY
