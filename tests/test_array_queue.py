import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from array_queue import ArrayQueue, QueueBase


class TestArrayQueue(unittest.TestCase):
    def test_new_queue_is_empty(self):
        q = ArrayQueue()
        self.assertEqual(q.size(), 0)
        self.assertTrue(q.is_empty())

    def test_queue_with_initial_value(self):
        q = ArrayQueue("Charles")
        self.assertEqual(q.size(), 1)
        self.assertEqual(q.peek(), "Charles")

    def test_initial_value_may_be_falsy(self):
        q = ArrayQueue(0)
        self.assertEqual(q.size(), 1)
        self.assertEqual(q.dequeue(), 0)

    def test_peek_on_empty_returns_none(self):
        q = ArrayQueue()
        self.assertIsNone(q.peek())

    def test_dequeue_on_empty_returns_none(self):
        q = ArrayQueue()
        self.assertIsNone(q.dequeue())
        self.assertEqual(q.size(), 0)

    def test_enqueue_none_raises(self):
        q = ArrayQueue()
        with self.assertRaises(ValueError):
            q.enqueue(None)
        self.assertTrue(q.is_empty())

    def test_fifo_order(self):
        q = ArrayQueue()
        q.enqueue(1)
        q.enqueue(2)
        q.enqueue(3)
        self.assertEqual(q.dequeue(), 1)
        self.assertEqual(q.dequeue(), 2)
        self.assertEqual(q.dequeue(), 3)

    def test_peek_does_not_remove(self):
        q = ArrayQueue()
        q.enqueue(42)
        self.assertEqual(q.peek(), 42)
        self.assertEqual(q.size(), 1)
        self.assertEqual(q.peek(), 42)

    def test_dequeue_past_empty_then_enqueue(self):
        q = ArrayQueue()
        q.enqueue("Charles")
        q.enqueue("Erick")
        q.dequeue()
        q.dequeue()
        self.assertIsNone(q.dequeue())
        q.enqueue("Alexander")
        q.enqueue("Kane")
        self.assertEqual(q.peek(), "Alexander")

    def test_circular_buffer_wrap_around(self):
        q = ArrayQueue()
        for i in range(1, 5):
            q.enqueue(i)
        q.dequeue()
        q.dequeue()
        q.enqueue(5)
        q.enqueue(6)
        self.assertEqual(q.peek(), 3)
        self.assertEqual(list(q), [3, 4, 5, 6])
        self.assertEqual(q.size(), 4)

    def test_growth_preserves_order(self):
        q = ArrayQueue()
        for i in range(10):
            q.enqueue(i)
        for i in range(10):
            self.assertEqual(q.dequeue(), i)

    def test_growth_after_wrap_preserves_order(self):
        q = ArrayQueue()
        for i in range(4):
            q.enqueue(i)
        q.dequeue()
        q.enqueue(4)
        q.enqueue(5)
        self.assertEqual(list(q), [1, 2, 3, 4, 5])

    def test_clear_makes_queue_empty(self):
        q = ArrayQueue()
        q.enqueue(1)
        q.enqueue(2)
        q.clear()
        self.assertTrue(q.is_empty())
        self.assertIsNone(q.peek())

    def test_enqueue_after_clear(self):
        q = ArrayQueue()
        q.enqueue(1)
        q.clear()
        q.enqueue(2)
        self.assertEqual(q.peek(), 2)
        self.assertEqual(q.size(), 1)

    def test_copy_of_wrapped_queue_is_independent(self):
        q = ArrayQueue()
        for i in range(4):
            q.enqueue(i)
        q.dequeue()
        q.enqueue(4)
        clone = q.copy()
        q.dequeue()
        clone.enqueue(5)
        self.assertEqual(list(q), [2, 3, 4])
        self.assertEqual(list(clone), [1, 2, 3, 4, 5])

    def test_works_with_non_primitive_types(self):
        q = ArrayQueue()
        q.enqueue([1, 2, 3])
        q.enqueue({"key": "value"})
        self.assertEqual(q.dequeue(), [1, 2, 3])
        self.assertEqual(q.peek(), {"key": "value"})

    def test_many_wrap_around_cycles(self):
        q = ArrayQueue()
        for cycle in range(100):
            for i in range(10):
                q.enqueue(cycle * 10 + i)
            for i in range(10):
                self.assertEqual(q.dequeue(), cycle * 10 + i)
        self.assertTrue(q.is_empty())

    def test_len_and_bool_dunders(self):
        q = ArrayQueue()
        self.assertEqual(len(q), 0)
        self.assertFalse(bool(q))
        q.enqueue(1)
        self.assertEqual(len(q), 1)
        self.assertTrue(bool(q))

    def test_queue_base_is_abstract(self):
        with self.assertRaises(TypeError):
            QueueBase()

    def test_array_queue_implements_queue_base(self):
        q = ArrayQueue(1)
        self.assertIsInstance(q, QueueBase)
        self.assertFalse(q.is_empty())
        self.assertEqual(len(q), 1)

    def test_repr(self):
        q = ArrayQueue()
        q.enqueue(1)
        q.enqueue(2)
        self.assertEqual(repr(q), "ArrayQueue([1, 2])")


if __name__ == "__main__":
    unittest.main()
