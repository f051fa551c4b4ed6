import unittest
import sys
import os
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inversions.counters.counter_errors import RunQueueInvariantError
from inversions.counters.run_length_queue import (
    RunLengthQueue,
    ceil_power_of_two,
    required_capacity,
)


class TestCapacityHelpers(unittest.TestCase):

    def test_ceil_power_of_two(self):
        self.assertEqual(ceil_power_of_two(0), 1)
        self.assertEqual(ceil_power_of_two(1), 1)
        self.assertEqual(ceil_power_of_two(2), 2)
        self.assertEqual(ceil_power_of_two(3), 4)
        self.assertEqual(ceil_power_of_two(16), 16)
        self.assertEqual(ceil_power_of_two(17), 32)

    def test_required_capacity_exceeds_max_runs(self):
        for n in range(2, 200):
            self.assertGreater(required_capacity(n), (n + 1) // 2)

    def test_capacity_is_power_of_two(self):
        for requested in (1, 5, 16, 100, 1000):
            q = RunLengthQueue(requested, min_capacity=1)
            self.assertEqual(q.capacity & (q.capacity - 1), 0)
            self.assertGreaterEqual(q.capacity, requested)

    def test_min_capacity_from_env(self):
        with mock.patch.dict(os.environ, {"INVERSIONS_MIN_QUEUE_CAPACITY": "64"}):
            self.assertEqual(RunLengthQueue(3).capacity, 64)
        with mock.patch.dict(os.environ, {"INVERSIONS_MIN_QUEUE_CAPACITY": "junk"}):
            self.assertEqual(RunLengthQueue(3).capacity, 16)


class TestRunLengthQueue(unittest.TestCase):

    def setUp(self):
        self.queue = RunLengthQueue(4, min_capacity=1)

    def test_fifo_order(self):
        for length in (3, 1, 4):
            self.queue.enqueue(length)
        self.assertEqual(self.queue.size(), 3)
        self.assertEqual([self.queue.dequeue() for _ in range(3)], [3, 1, 4])
        self.assertEqual(len(self.queue), 0)

    def test_wraps_around(self):
        for round_ in range(10):
            self.queue.enqueue(round_ + 1)
            self.queue.enqueue(round_ + 2)
            self.assertEqual(self.queue.dequeue(), round_ + 1)
            self.assertEqual(self.queue.dequeue(), round_ + 2)
        self.assertEqual(self.queue.size(), 0)

    def test_extend_last_run(self):
        self.queue.enqueue(2)
        self.queue.enqueue(5)
        self.queue.extend_last_run(3)
        self.assertEqual(list(self.queue), [2, 8])

    def test_extend_last_run_across_wrap(self):
        for _ in range(3):
            self.queue.enqueue(1)
            self.queue.dequeue()
        # the run lands in the final slot and the tail wraps to slot 0
        self.queue.enqueue(6)
        self.queue.extend_last_run(1)
        self.assertEqual(self.queue.dequeue(), 7)

    def test_iteration_does_not_consume(self):
        self.queue.enqueue(9)
        self.assertEqual(list(self.queue), [9])
        self.assertEqual(self.queue.size(), 1)
        self.assertIn("9", repr(self.queue))

    def test_dequeue_empty_is_invariant_error(self):
        with self.assertRaises(RunQueueInvariantError) as ctx:
            self.queue.dequeue()
        self.assertEqual(ctx.exception.context, "dequeue")
        self.assertEqual(ctx.exception.size, 0)

    def test_extend_empty_is_invariant_error(self):
        with self.assertRaises(RunQueueInvariantError):
            self.queue.extend_last_run(1)

    def test_overflow_is_invariant_error(self):
        for _ in range(self.queue.capacity):
            self.queue.enqueue(1)
        with self.assertRaises(RunQueueInvariantError) as ctx:
            self.queue.enqueue(1)
        self.assertEqual(ctx.exception.capacity, 4)


if __name__ == '__main__':
    unittest.main()
