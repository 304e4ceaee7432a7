"""An unbalanced binary search tree with optional locking."""

from __future__ import annotations

import threading
from contextlib import nullcontext
from typing import Any


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BST:
    """A binary search tree mapping ordered keys to values."""

    def __init__(self, thread_safe: bool = True) -> None:
        self.thread_safe = thread_safe
        self._lock = threading.Lock() if thread_safe else nullcontext()
        self._root: _Node | None = None

    def insert(self, key: Any, value: Any) -> None:
        """Insert a key, or replace the value of an existing one."""
        with self._lock:
            if self._root is None:
                self._root = _Node(key, value)
                return
            current = self._root
            while True:
                if key < current.key:
                    if current.left is None:
                        current.left = _Node(key, value)
                        return
                    current = current.left
                elif key > current.key:
                    if current.right is None:
                        current.right = _Node(key, value)
                        return
                    current = current.right
                else:
                    current.value = value
                    return

    def _find(self, key: Any) -> _Node | None:
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def search(self, key: Any) -> Any:
        """Return the value for ``key``; raise KeyError when absent."""
        with self._lock:
            node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when absent."""
        with self._lock:
            node = self._find(key)
            return default if node is None else node.value

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            parent = None
            current = self._root
            while current is not None:
                if key < current.key:
                    parent, current = current, current.left
                elif key > current.key:
                    parent, current = current, current.right
                else:
                    break
            if current is None:
                return
            if current.left is not None and current.right is not None:
                succ_parent, succ = current, current.right
                while succ.left is not None:
                    succ_parent, succ = succ, succ.left
                current.key, current.value = succ.key, succ.value
                if succ_parent is current:
                    succ_parent.right = succ.right
                else:
                    succ_parent.left = succ.right
                return
            child = current.left if current.left is not None else current.right
            if parent is None:
                self._root = child
            elif parent.left is current:
                parent.left = child
            else:
                parent.right = child

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return self._find(key) is not None