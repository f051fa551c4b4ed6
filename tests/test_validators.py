import unittest
import sys
import os
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inversions.counters.counter_errors import (
    DEFAULT_MIN_QUEUE_CAPACITY,
    NullArgumentError,
    RangeIndexError,
    RunQueueInvariantError,
    resolve_debug_mode,
    resolve_min_queue_capacity,
)
from inversions.validators import (
    check_indices,
    is_sorted,
    is_stable_permutation,
    natural_order,
    require_not_none,
    resolve_comparator,
    resolve_range,
)


class Tagged:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key


class TestNaturalOrder(unittest.TestCase):

    def test_three_way(self):
        self.assertEqual(natural_order(1, 2), -1)
        self.assertEqual(natural_order(2, 1), 1)
        self.assertEqual(natural_order(2, 2), 0)

    def test_only_needs_less_than(self):
        self.assertEqual(natural_order(Tagged(1, "a"), Tagged(1, "b")), 0)
        self.assertEqual(natural_order(Tagged(0, "a"), Tagged(1, "b")), -1)


class TestArgumentChecks(unittest.TestCase):

    def test_check_indices_accepts_valid_ranges(self):
        for from_index, to_index in [(0, 0), (0, 5), (2, 3), (5, 5)]:
            check_indices(5, from_index, to_index)

    def test_check_indices_reports_bound(self):
        with self.assertRaises(RangeIndexError) as ctx:
            check_indices(5, -2, 3)
        self.assertEqual((ctx.exception.bound, ctx.exception.value, ctx.exception.length),
                         ("from_index", -2, 5))

        with self.assertRaises(RangeIndexError) as ctx:
            check_indices(5, 0, 6)
        self.assertEqual((ctx.exception.bound, ctx.exception.value), ("to_index", 6))

        with self.assertRaises(RangeIndexError) as ctx:
            check_indices(5, 4, 3)
        self.assertEqual((ctx.exception.bound, ctx.exception.value), ("from_index", 4))

    def test_require_not_none(self):
        self.assertEqual(require_not_none([1], "sequence"), [1])
        with self.assertRaises(NullArgumentError) as ctx:
            require_not_none(None, "sequence")
        self.assertEqual(ctx.exception.argument, "sequence")
        self.assertIsInstance(ctx.exception, TypeError)

    def test_resolve_comparator(self):
        self.assertIs(resolve_comparator(None), natural_order)
        cmp = lambda a, b: 0
        self.assertIs(resolve_comparator(cmp), cmp)
        with self.assertRaises(NullArgumentError):
            resolve_comparator(42)

    def test_resolve_range_defaults(self):
        from_index, to_index, comparator = resolve_range([1, 2, 3])
        self.assertEqual((from_index, to_index), (0, 3))
        self.assertIs(comparator, natural_order)

    def test_resolve_range_rejects_non_integer_index(self):
        with self.assertRaises(TypeError):
            resolve_range([1, 2, 3], 0.5, 2)
        with self.assertRaises(TypeError):
            resolve_range([1, 2, 3], 0, "2")


class TestSortedness(unittest.TestCase):

    def test_is_sorted(self):
        self.assertTrue(is_sorted([]))
        self.assertTrue(is_sorted([1, 1, 2]))
        self.assertFalse(is_sorted([2, 1]))
        self.assertTrue(is_sorted([9, 1, 2, 0], 1, 3))
        self.assertTrue(is_sorted([3, 2, 1], comparator=lambda a, b: b - a))

    def test_is_stable_permutation(self):
        a, b, c = Tagged(1, "a"), Tagged(1, "b"), Tagged(0, "c")
        self.assertTrue(is_stable_permutation([a, b, c], [c, a, b]))
        self.assertFalse(is_stable_permutation([a, b, c], [c, b, a]))
        self.assertFalse(is_stable_permutation([a, b], [a, a]))
        self.assertFalse(is_stable_permutation([a, b], [a]))


class TestConfiguration(unittest.TestCase):

    def test_debug_mode_priority(self):
        with mock.patch.dict(os.environ, {"INVERSIONS_DEBUG": "yes"}):
            self.assertTrue(resolve_debug_mode())
            self.assertFalse(resolve_debug_mode(False))
        with mock.patch.dict(os.environ, {"INVERSIONS_DEBUG": "0"}):
            self.assertFalse(resolve_debug_mode())
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(resolve_debug_mode())

    def test_min_queue_capacity(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_min_queue_capacity(), DEFAULT_MIN_QUEUE_CAPACITY)
            self.assertEqual(resolve_min_queue_capacity(4), 4)
            self.assertEqual(resolve_min_queue_capacity(-1), DEFAULT_MIN_QUEUE_CAPACITY)
        with mock.patch.dict(os.environ, {"INVERSIONS_MIN_QUEUE_CAPACITY": "128"}):
            self.assertEqual(resolve_min_queue_capacity(), 128)

    def test_invariant_error_context(self):
        err = RunQueueInvariantError(capacity=8, size=8, context="enqueue")
        self.assertIsInstance(err, RuntimeError)
        self.assertEqual((err.capacity, err.size, err.context), (8, 8, "enqueue"))


if __name__ == '__main__':
    unittest.main()
