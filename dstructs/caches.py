"""Least-recently-used and least-frequently-used caches with optional locking."""

from __future__ import annotations

import threading
from collections import OrderedDict
from contextlib import nullcontext
from typing import Any, Hashable


def _make_lock(thread_safe: bool):
    return threading.Lock() if thread_safe else nullcontext()


class LRUCache:
    """A fixed-capacity cache that evicts the least recently used key."""

    def __init__(self, capacity: int, thread_safe: bool = True) -> None:
        self.capacity = capacity
        self.thread_safe = thread_safe
        self._lock = _make_lock(thread_safe)
        # Most recently used keys sit at the end.
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` and mark it most recently used."""
        with self._lock:
            if key not in self._entries:
                return default
            self._entries.move_to_end(key)
            return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store a value, evicting the least recently used key when full."""
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.capacity and self._entries:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def remove(self, key: Hashable) -> None:
        """Drop ``key`` if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __repr__(self) -> str:
        with self._lock:
            items = list(self._entries.items())
        return f"LRUCache(capacity={self.capacity}, items={items!r})"


class LFUCache:
    """A fixed-capacity cache that evicts the least frequently used key.

    Every ``get`` and every ``put`` of an existing key counts as a use.
    Among keys with the same count, the one that reached it first goes first.
    """

    def __init__(self, capacity: int, thread_safe: bool = True) -> None:
        self.capacity = capacity
        self.thread_safe = thread_safe
        self._lock = _make_lock(thread_safe)
        self._values: dict[Hashable, Any] = {}
        self._counts: dict[Hashable, int] = {}
        self._buckets: dict[int, dict[Hashable, None]] = {}

    def _detach(self, key: Hashable) -> int:
        count = self._counts[key]
        bucket = self._buckets[count]
        del bucket[key]
        if not bucket:
            del self._buckets[count]
        return count

    def _touch(self, key: Hashable) -> None:
        count = self._detach(key) + 1
        self._counts[key] = count
        self._buckets.setdefault(count, {})[key] = None

    def _evict(self) -> None:
        if not self._buckets:
            return
        lowest = min(self._buckets)
        victim = next(iter(self._buckets[lowest]))
        self._detach(victim)
        del self._counts[victim]
        del self._values[victim]

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` and count the access."""
        with self._lock:
            if key not in self._values:
                return default
            self._touch(key)
            return self._values[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store a value, evicting the least frequently used key when full."""
        with self._lock:
            if key in self._values:
                self._touch(key)
            else:
                if len(self._values) >= self.capacity:
                    self._evict()
                self._counts[key] = 1
                self._buckets.setdefault(1, {})[key] = None
            self._values[key] = value

    def remove(self, key: Hashable) -> None:
        """Drop ``key`` if present."""
        with self._lock:
            if key not in self._values:
                return
            self._detach(key)
            del self._counts[key]
            del self._values[key]

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._values.clear()
            self._counts.clear()
            self._buckets.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._values

    def __repr__(self) -> str:
        with self._lock:
            items = list(self._values.items())
        return f"LFUCache(capacity={self.capacity}, items={items!r})"