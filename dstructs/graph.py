"""A directed graph with node values and optional locking."""

from __future__ import annotations

import threading
from collections import deque
from contextlib import nullcontext
from typing import Any, Hashable


class Graph:
    """A directed graph whose nodes carry values.

    Edges may point at keys that were never added as nodes. Traversals
    visit neighbours in the order of their string form.
    """

    def __init__(self, thread_safe: bool = True) -> None:
        self.thread_safe = thread_safe
        self._lock = threading.Lock() if thread_safe else nullcontext()
        self._nodes: dict[Hashable, Any] = {}
        self._edges: dict[Hashable, set] = {}

    def add_node(self, key: Hashable, value: Any) -> None:
        """Add a node, or replace the value of an existing one."""
        with self._lock:
            self._nodes[key] = value

    def add_edge(self, source: Hashable, target: Hashable) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        with self._lock:
            self._edges.setdefault(source, set()).add(target)

    def has_node(self, key: Hashable) -> bool:
        """Tell whether a node with ``key`` exists."""
        with self._lock:
            return key in self._nodes

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        """Tell whether an edge from ``source`` to ``target`` exists."""
        with self._lock:
            return target in self._edges.get(source, ())

    def remove_node(self, key: Hashable) -> None:
        """Remove a node with its outgoing and incoming edges."""
        with self._lock:
            self._nodes.pop(key, None)
            self._edges.pop(key, None)
            for neighbors in self._edges.values():
                neighbors.discard(key)

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        """Remove the edge from ``source`` to ``target`` if present."""
        with self._lock:
            neighbors = self._edges.get(source)
            if neighbors is not None:
                neighbors.discard(target)

    def neighbors(self, key: Hashable) -> list:
        """Return the targets of the edges leaving ``key``."""
        with self._lock:
            return list(self._edges.get(key, ()))

    def nodes(self) -> list:
        """Return every node key."""
        with self._lock:
            return list(self._nodes)

    def edges(self) -> list[tuple[Any, Any]]:
        """Return every edge as a ``(source, target)`` pair."""
        with self._lock:
            return [
                (source, target)
                for source, targets in self._edges.items()
                for target in targets
            ]

    def node_value(self, key: Hashable, default: Any = None) -> Any:
        """Return the value of node ``key``, or ``default`` when absent."""
        with self._lock:
            return self._nodes.get(key, default)

    def _sorted_neighbors(self, key: Hashable) -> list:
        return sorted(self._edges.get(key, ()), key=str)

    def bfs(self, start: Hashable) -> list:
        """Return the keys reached breadth-first from ``start``; empty if absent."""
        with self._lock:
            if start not in self._nodes:
                return []
            visited = {start}
            queue = deque([start])
            result = []
            while queue:
                node = queue.popleft()
                result.append(node)
                for neighbor in self._sorted_neighbors(node):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        queue.append(neighbor)
            return result

    def dfs(self, start: Hashable) -> list:
        """Return the keys reached depth-first from ``start``; empty if absent."""
        with self._lock:
            if start not in self._nodes:
                return []
            visited = {start}
            result = [start]
            stack = [iter(self._sorted_neighbors(start))]
            while stack:
                for neighbor in stack[-1]:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        result.append(neighbor)
                        stack.append(iter(self._sorted_neighbors(neighbor)))
                        break
                else:
                    stack.pop()
            return result

    def __repr__(self) -> str:
        return f"Graph(nodes={self.nodes()!r}, edges={self.edges()!r})"