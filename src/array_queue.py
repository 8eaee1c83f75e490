"""Array-backed FIFO queue on a growable ring buffer.

Shares the size/is_empty/peek surface with IndexedMinHeap. None is never
stored: dequeue() and peek() return None when the queue is empty.
"""

from abc import ABC, abstractmethod

_UNSET = object()


class QueueBase(ABC):
    """FIFO interface: enqueue at the back, dequeue and peek at the front."""

    @abstractmethod
    def enqueue(self, value):
        pass

    @abstractmethod
    def dequeue(self):
        """Remove and return the front value, or None when empty."""
        pass

    @abstractmethod
    def peek(self):
        pass

    @abstractmethod
    def size(self):
        pass

    def is_empty(self):
        return self.size() == 0

    def __len__(self):
        return self.size()

    def __bool__(self):
        return self.size() > 0


class ArrayQueue(QueueBase):
    INITIAL_CAPACITY = 4

    def __init__(self, initial=_UNSET):
        self._reset(self.INITIAL_CAPACITY)
        if initial is not _UNSET:
            self.enqueue(initial)

    def enqueue(self, value):
        if value is None:
            raise ValueError("cannot enqueue None")
        if self._count == len(self._slots):
            self._resize(2 * len(self._slots))
        self._slots[self._slot(self._count)] = value
        self._count += 1

    def dequeue(self):
        if not self._count:
            return None
        value, self._slots[self._front] = self._slots[self._front], None
        self._front = self._slot(1)
        self._count -= 1
        return value

    def peek(self):
        return self._slots[self._front] if self._count else None

    def size(self):
        return self._count

    def clear(self):
        self._reset(len(self._slots))

    def copy(self):
        """Return a shallow copy with the elements compacted to the front."""
        clone = ArrayQueue()
        clone._slots = list(self) + [None] * (len(self._slots) - self._count)
        clone._count = self._count
        return clone

    def _slot(self, offset):
        # Physical index of the element `offset` places behind the front.
        return (self._front + offset) % len(self._slots)

    def _reset(self, capacity):
        self._slots = [None] * capacity
        self._front = 0
        self._count = 0

    def _resize(self, capacity):
        values = list(self)
        self._slots = values + [None] * (capacity - len(values))
        self._front = 0

    def __iter__(self):
        for offset in range(self._count):
            yield self._slots[self._slot(offset)]

    def __repr__(self):
        return f"ArrayQueue({list(self)})"
