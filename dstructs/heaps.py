"""A binary min-heap and a priority queue built on it."""

from __future__ import annotations

import operator
import threading
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """A binary heap ordered by a ``less(a, b)`` predicate."""

    def __init__(
        self,
        less: Callable[[T, T], bool] | None = None,
        thread_safe: bool = True,
    ) -> None:
        self.thread_safe = thread_safe
        self._less = less if less is not None else operator.lt
        self._lock = threading.Lock() if thread_safe else nullcontext()
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Add an item."""
        with self._lock:
            self._items.append(item)
            self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the smallest item; raise IndexError when empty."""
        with self._lock:
            items = self._items
            if not items:
                raise IndexError("pop from empty heap")
            top = items[0]
            last = items.pop()
            if items:
                items[0] = last
                self._sift_down(0)
            return top

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        with self._lock:
            if not self._items:
                raise IndexError("peek at empty heap")
            return self._items[0]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        with self._lock:
            return bool(self._items)

    def _sift_up(self, i: int) -> None:
        items, less = self._items, self._less
        while i > 0:
            parent = (i - 1) // 2
            if not less(items[i], items[parent]):
                break
            items[i], items[parent] = items[parent], items[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        items, less = self._items, self._less
        size = len(items)
        while True:
            left = 2 * i + 1
            if left >= size:
                break
            smallest = left
            right = left + 1
            if right < size and less(items[right], items[left]):
                smallest = right
            if not less(items[smallest], items[i]):
                break
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest


@dataclass
class PriorityQueueItem(Generic[T]):
    """A value paired with its integer priority."""

    value: T
    priority: int


def _lower_priority_first(a: PriorityQueueItem, b: PriorityQueueItem) -> bool:
    return a.priority < b.priority


class PriorityQueue(Generic[T]):
    """A queue that yields values in order of priority, lowest first by default."""

    def __init__(
        self,
        thread_safe: bool = True,
        less: Callable[[PriorityQueueItem, PriorityQueueItem], bool] | None = None,
    ) -> None:
        self.thread_safe = thread_safe
        self._heap: MinHeap[PriorityQueueItem[T]] = MinHeap(
            less if less is not None else _lower_priority_first, thread_safe
        )

    def enqueue(self, value: T, priority: int) -> None:
        """Add a value with the given priority."""
        self._heap.push(PriorityQueueItem(value, priority))

    def dequeue(self) -> tuple[Any, int]:
        """Remove and return ``(value, priority)``; raise IndexError when empty."""
        try:
            item = self._heap.pop()
        except IndexError:
            raise IndexError("dequeue from empty priority queue") from None
        return item.value, item.priority

    def peek(self) -> tuple[Any, int]:
        """Return ``(value, priority)`` of the next item without removing it."""
        try:
            item = self._heap.peek()
        except IndexError:
            raise IndexError("peek at empty priority queue") from None
        return item.value, item.priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)