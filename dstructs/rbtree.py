"""A red-black tree with optional locking."""

from __future__ import annotations

import enum
import threading
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any


class Color(enum.Enum):
    """The colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree."""

    key: Any
    value: Any
    color: Color = Color.RED
    left: RBNode | None = field(default=None, repr=False)
    right: RBNode | None = field(default=None, repr=False)
    parent: RBNode | None = field(default=None, repr=False)


def _is_black(node: RBNode | None) -> bool:
    return node is None or node.color is Color.BLACK


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


class RBTree:
    """A red-black tree mapping ordered keys to values."""

    def __init__(self, thread_safe: bool = True) -> None:
        self.thread_safe = thread_safe
        self._lock = threading.Lock() if thread_safe else nullcontext()
        self.root: RBNode | None = None

    def insert(self, key: Any, value: Any) -> None:
        """Insert a key, or replace the value of an existing one."""
        with self._lock:
            node = RBNode(key, value)
            if self.root is None:
                node.color = Color.BLACK
                self.root = node
                return

            parent = None
            current = self.root
            while current is not None:
                parent = current
                if key < current.key:
                    current = current.left
                elif key > current.key:
                    current = current.right
                else:
                    current.value = value
                    return

            node.parent = parent
            if key < parent.key:
                parent.left = node
            else:
                parent.right = node
            self._fix_insert(node)

    def _fix_insert(self, node: RBNode) -> None:
        while node is not self.root and node.parent is not None and node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if grandparent is None:
                break
            if parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                if node.parent is not None:
                    node.parent.color = Color.BLACK
                    if node.parent.parent is not None:
                        node.parent.parent.color = Color.RED
                        self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left
                if _is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                if node.parent is not None:
                    node.parent.color = Color.BLACK
                    if node.parent.parent is not None:
                        node.parent.parent.color = Color.RED
                        self._rotate_left(node.parent.parent)
        self.root.color = Color.BLACK

    def _rotate_left(self, node: RBNode) -> None:
        child = node.right
        node.right = child.left
        if child.left is not None:
            child.left.parent = node
        child.parent = node.parent
        if node.parent is None:
            self.root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child
        child.left = node
        node.parent = child

    def _rotate_right(self, node: RBNode) -> None:
        child = node.left
        node.left = child.right
        if child.right is not None:
            child.right.parent = node
        child.parent = node.parent
        if node.parent is None:
            self.root = child
        elif node is node.parent.right:
            node.parent.right = child
        else:
            node.parent.left = child
        child.right = node
        node.parent = child

    def _find(self, key: Any) -> RBNode | None:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def search(self, key: Any) -> RBNode:
        """Return the node holding ``key``; raise KeyError when absent."""
        with self._lock:
            node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            node = self._find(key)
            if node is not None:
                self._delete_node(node)

    def _delete_node(self, node: RBNode) -> None:
        original_color = node.color
        if node.left is None:
            child, child_parent = node.right, node.parent
            self._transplant(node, node.right)
        elif node.right is None:
            child, child_parent = node.left, node.parent
            self._transplant(node, node.left)
        else:
            successor = self._minimum(node.right)
            original_color = successor.color
            child = successor.right
            if successor.parent is node:
                child_parent = successor
                if child is not None:
                    child.parent = successor
            else:
                child_parent = successor.parent
                self._transplant(successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            self._transplant(node, successor)
            successor.left = node.left
            successor.left.parent = successor
            successor.color = node.color

        if original_color is Color.BLACK:
            self._fix_delete(child, child_parent)

    def _transplant(self, u: RBNode, v: RBNode | None) -> None:
        if u.parent is None:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not None:
            v.parent = u.parent

    def _fix_delete(self, node: RBNode | None, parent: RBNode | None) -> None:
        while node is not self.root and _is_black(node):
            if parent is None:
                break
            if node is None:
                sibling = parent.right if parent.left is None else parent.left
            else:
                if node.parent is None:
                    break
                parent = node.parent
                sibling = parent.right if node is parent.left else parent.left

            if sibling is None:
                break

            if sibling.color is Color.RED:
                sibling.color = Color.BLACK
                parent.color = Color.RED
                if sibling is parent.right:
                    self._rotate_left(parent)
                    sibling = parent.right
                else:
                    self._rotate_right(parent)
                    sibling = parent.left
                if sibling is None:
                    break

            if _is_black(sibling.left) and _is_black(sibling.right):
                sibling.color = Color.RED
                node = parent
                parent = node.parent
            elif sibling is parent.right:
                if _is_black(sibling.right):
                    if sibling.left is not None:
                        sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                    sibling = parent.right
                    if sibling is None:
                        break
                sibling.color = parent.color
                parent.color = Color.BLACK
                if sibling.right is not None:
                    sibling.right.color = Color.BLACK
                self._rotate_left(parent)
                node = self.root
            else:
                if _is_black(sibling.left):
                    if sibling.right is not None:
                        sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                    sibling = parent.left
                    if sibling is None:
                        break
                sibling.color = parent.color
                parent.color = Color.BLACK
                if sibling.left is not None:
                    sibling.left.color = Color.BLACK
                self._rotate_right(parent)
                node = self.root
        if node is not None:
            node.color = Color.BLACK

    @staticmethod
    def _minimum(node: RBNode) -> RBNode:
        while node.left is not None:
            node = node.left
        return node

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return self._find(key) is not None