"""A hash set with optional locking."""

from __future__ import annotations

import threading
from contextlib import nullcontext
from typing import Any, Iterable, Iterator


class Set:
    """An unordered collection of unique hashable items."""

    def __init__(self, thread_safe: bool = True) -> None:
        self.thread_safe = thread_safe
        self._lock = threading.Lock() if thread_safe else nullcontext()
        self._items: set = set()

    @classmethod
    def _from_items(cls, items: Iterable[Any], thread_safe: bool) -> Set:
        result = cls(thread_safe)
        result._items = set(items)
        return result

    def _snapshot(self) -> set:
        with self._lock:
            return set(self._items)

    def add(self, item: Any) -> None:
        """Add an item; adding an existing item has no effect."""
        with self._lock:
            self._items.add(item)

    def remove(self, item: Any) -> None:
        """Remove an item if present."""
        with self._lock:
            self._items.discard(item)

    def clear(self) -> None:
        """Remove every item."""
        with self._lock:
            self._items = set()

    def union(self, other: Set) -> Set:
        """Return a new set with the items of both sets."""
        return self._from_items(self._snapshot() | other._snapshot(), self.thread_safe)

    def intersection(self, other: Set) -> Set:
        """Return a new set with the items present in both sets."""
        return self._from_items(self._snapshot() & other._snapshot(), self.thread_safe)

    def difference(self, other: Set) -> Set:
        """Return a new set with the items of this set absent from ``other``."""
        return self._from_items(self._snapshot() - other._snapshot(), self.thread_safe)

    def items(self) -> list:
        """Return the items as a list in no particular order."""
        return list(self._snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def __contains__(self, item: Any) -> bool:
        with self._lock:
            return item in self._items

    def __repr__(self) -> str:
        ordered = sorted(self._snapshot(), key=repr)
        return f"Set({ordered!r})"