"""A self-balancing AVL tree with optional locking."""

from __future__ import annotations

import threading
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node; ``height`` counts a leaf as 1."""

    key: Any
    value: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _balance(node: AVLNode | None) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: AVLNode | None, key: Any, value: Any) -> AVLNode:
    if node is None:
        return AVLNode(key, value)
    if key < node.key:
        node.left = _insert(node.left, key, value)
    elif key > node.key:
        node.right = _insert(node.right, key, value)
    else:
        node.value = value
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: AVLNode | None, key: Any) -> AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key, node.value = successor.key, successor.value
        node.right = _delete(node.right, successor.key)

    _update(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A height-balanced binary search tree mapping ordered keys to values."""

    def __init__(self, thread_safe: bool = True) -> None:
        self.thread_safe = thread_safe
        self._lock = threading.Lock() if thread_safe else nullcontext()
        self.root: AVLNode | None = None

    def insert(self, key: Any, value: Any) -> None:
        """Insert a key, or replace the value of an existing one."""
        with self._lock:
            self.root = _insert(self.root, key, value)

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self.root = _delete(self.root, key)

    def _find(self, key: Any) -> AVLNode | None:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
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

    def in_order_traversal(self) -> list:
        """Return the values in ascending key order."""
        with self._lock:
            result = []
            stack: list[AVLNode] = []
            node = self.root
            while stack or node is not None:
                while node is not None:
                    stack.append(node)
                    node = node.left
                node = stack.pop()
                result.append(node.value)
                node = node.right
            return result

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return self._find(key) is not None