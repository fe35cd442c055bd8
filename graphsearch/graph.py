"""Adjacency-list graph with integer-numbered nodes and weighted edges."""

from __future__ import annotations

from collections.abc import Iterator


class Graph:
    """A graph whose nodes are the integers 0 through ``node_count``.

    Edges are kept in insertion order, which fixes the order in which the
    search algorithms visit neighbours.
    """

    def __init__(self, node_count: int, directed: bool = False) -> None:
        if node_count < 0:
            raise ValueError(f"node_count must not be negative, got {node_count}")
        self.node_count = node_count
        self.directed = directed
        self._adjacency: list[list[tuple[int, int]]] = [
            [] for _ in range(node_count + 1)
        ]

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node <= self.node_count

    def __len__(self) -> int:
        return self.node_count + 1

    def _require(self, node: int) -> None:
        if node not in self:
            raise ValueError(
                f"node {node!r} is outside the range 0..{self.node_count}"
            )

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless directed."""
        self._require(u)
        self._require(v)
        self._adjacency[u].append((v, weight))
        if not self.directed:
            self._adjacency[v].append((u, weight))

    def neighbors(self, node: int) -> list[int]:
        """Return the neighbours of ``node`` in the order their edges were added."""
        self._require(node)
        return [neighbor for neighbor, _ in self._adjacency[node]]

    def weighted_neighbors(self, node: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs for ``node`` in insertion order."""
        self._require(node)
        return list(self._adjacency[node])

    def nodes(self) -> Iterator[int]:
        """Iterate over every valid node number."""
        return iter(range(self.node_count + 1))