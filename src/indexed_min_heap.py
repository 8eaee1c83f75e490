"""Indexed binary min-heap.

Alongside the level-order list, the heap keeps a position index mapping each
distinct value to the sorted set of slots that currently hold it. The index
gives O(1) membership tests and lets remove() find an occurrence without
scanning the list. Elements must be hashable and totally ordered; None is
never stored, so peek() and poll() return None to mean "empty".
"""

from typing import TypeVar, Generic, List, Dict, Iterable, Iterator, Optional

from sortedcontainers import SortedSet

T = TypeVar('T')


class IndexedMinHeap(Generic[T]):
    def __init__(self) -> None:
        self._data: List[T] = []
        self._positions: Dict[T, SortedSet] = {}

    def add(self, element: T) -> None:
        if element is None:
            raise ValueError("cannot add None to IndexedMinHeap")
        # An element that cannot be ordered against the root raises here,
        # before the list or the index is touched.
        if self._data and not (self._data[0] <= element or element <= self._data[0]):
            raise TypeError(f"cannot order {element!r} against heap elements")
        self._append(element)
        self._sift_up(len(self._data) - 1)

    def poll(self) -> Optional[T]:
        return self._remove_at(0)

    def peek(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def contains(self, element: T) -> bool:
        if element is None:
            return False
        try:
            return element in self._positions
        except TypeError:
            # Unhashable values can never have been stored.
            return False

    def remove(self, element: T) -> bool:
        """Remove one occurrence of element. Returns False if it is absent."""
        if element is None:
            return False
        try:
            positions = self._positions.get(element)
        except TypeError:
            return False
        if not positions:
            return False
        self._remove_at(positions[0])
        return True

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()
        self._positions.clear()

    def copy(self) -> 'IndexedMinHeap[T]':
        clone: IndexedMinHeap[T] = IndexedMinHeap()
        clone._data = self._data.copy()
        clone._positions = {value: SortedSet(slots) for value, slots in self._positions.items()}
        return clone

    def to_list(self) -> List[T]:
        """Level-order snapshot of the backing list."""
        return list(self._data)

    def is_min_heap(self, k: int = 0) -> bool:
        """Recursively check the heap property for the subtree rooted at k.

        Meant for tests and debugging; call with k=0 to check the whole heap.
        """
        if k < 0:
            raise IndexError("is_min_heap: root index must be non-negative")
        size = len(self._data)
        if k >= size:
            return True
        left = 2 * k + 1
        right = 2 * k + 2
        if left < size and not self._data[k] <= self._data[left]:
            return False
        if right < size and not self._data[k] <= self._data[right]:
            return False
        return self.is_min_heap(left) and self.is_min_heap(right)

    @staticmethod
    def from_array(arr: Iterable[T]) -> 'IndexedMinHeap[T]':
        """Build a heap from an array in O(n) by bottom-up heapify.

        Note: Creates a shallow copy of the input; any iterable is accepted.
        """
        values = list(arr)
        _reject_none(values)
        heap: IndexedMinHeap[T] = IndexedMinHeap()
        heap._data = values
        for i, value in enumerate(heap._data):
            heap._positions.setdefault(value, SortedSet()).add(i)
        for i in range(max(0, len(heap._data) // 2 - 1), -1, -1):
            heap._sift_down(i)
        return heap

    @staticmethod
    def from_iterable(items: Iterable[T]) -> 'IndexedMinHeap[T]':
        """Build a heap by adding items one at a time, O(n log n)."""
        values = list(items)
        _reject_none(values)
        heap: IndexedMinHeap[T] = IndexedMinHeap()
        for value in values:
            heap.add(value)
        return heap

    # Every list mutation goes through the helpers below so the
    # position index always matches the list.

    def _append(self, value: T) -> None:
        self._positions.setdefault(value, SortedSet()).add(len(self._data))
        self._data.append(value)

    def _truncate(self) -> T:
        value = self._data.pop()
        slots = self._positions[value]
        slots.remove(len(self._data))
        if not slots:
            del self._positions[value]
        return value

    def _swap(self, i: int, j: int) -> None:
        value_i = self._data[i]
        value_j = self._data[j]
        self._data[i], self._data[j] = value_j, value_i
        if value_i == value_j:
            return
        slots_i = self._positions[value_i]
        slots_i.remove(i)
        slots_i.add(j)
        slots_j = self._positions[value_j]
        slots_j.remove(j)
        slots_j.add(i)

    def _remove_at(self, index: int) -> Optional[T]:
        if not self._data:
            return None
        last = len(self._data) - 1
        self._swap(index, last)
        removed = self._truncate()
        if index == last:
            return removed
        # The displaced element can only be out of place in one direction.
        if self._sift_down(index) == index:
            self._sift_up(index)
        return removed

    def _sift_up(self, index: int) -> int:
        while index > 0:
            parent = (index - 1) // 2
            if self._data[index] <= self._data[parent]:
                self._swap(index, parent)
                index = parent
            else:
                break
        return index

    def _sift_down(self, index: int) -> int:
        size = len(self._data)
        while True:
            left = 2 * index + 1
            right = 2 * index + 2
            if left >= size:
                break
            smallest = left
            if right < size and self._data[right] <= self._data[left]:
                smallest = right
            if self._data[index] <= self._data[smallest]:
                break
            self._swap(index, smallest)
            index = smallest
        return index

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __contains__(self, element: T) -> bool:
        return self.contains(element)

    def __repr__(self) -> str:
        return f"IndexedMinHeap({self._data})"

    def __str__(self) -> str:
        return f"IndexedMinHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.poll()


def _reject_none(values: List[T]) -> None:
    for value in values:
        if value is None:
            raise ValueError("cannot add None to IndexedMinHeap")
