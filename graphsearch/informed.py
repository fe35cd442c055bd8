"""Heuristic graph searches: A*, greedy best-first and hill climbing."""

from __future__ import annotations

import heapq
from collections.abc import Mapping
from dataclasses import dataclass, field
from itertools import count

from graphsearch.graph import Graph


@dataclass
class PathResult:
    """Outcome of an informed search.

    ``path`` runs from start to goal and is empty when the goal was not
    reached; ``cost`` is the accumulated edge cost where the search tracks
    one; ``visited`` lists nodes in the order they were expanded.
    """

    path: list[int] = field(default_factory=list)
    cost: int | None = None
    visited: list[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)


class LocalOptimumError(Exception):
    """Hill climbing reached a node with no neighbour of lower heuristic."""

    def __init__(self, node: int, path: list[int]) -> None:
        super().__init__(f"stuck at local optimum at node {node}")
        self.node = node
        self.path = list(path)


def _require(graph: Graph, node: int) -> None:
    if node not in graph:
        raise ValueError(f"node {node!r} is not in the graph")


def _estimate(heuristic: Mapping[int, int], node: int) -> int:
    return heuristic.get(node, 0)


def _trace(parent: dict[int, int], goal: int) -> list[int]:
    path = [goal]
    while (previous := parent.get(path[-1])) is not None:
        path.append(previous)
    path.reverse()
    return path


def a_star(
    graph: Graph, heuristic: Mapping[int, int], start: int, goal: int
) -> PathResult:
    """Search by ``f = g + h``; nodes missing from ``heuristic`` count as 0."""
    _require(graph, start)
    _require(graph, goal)
    tie = count()
    heap = [(_estimate(heuristic, start), next(tie), start, 0)]
    visited: set[int] = set()
    order: list[int] = []
    parent: dict[int, int] = {}
    while heap:
        _, _, node, cost = heapq.heappop(heap)
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        if node == goal:
            return PathResult(_trace(parent, goal), cost, order)
        for neighbor, weight in graph.weighted_neighbors(node):
            if neighbor not in visited:
                parent[neighbor] = node
                new_cost = cost + weight
                priority = new_cost + _estimate(heuristic, neighbor)
                heapq.heappush(heap, (priority, next(tie), neighbor, new_cost))
    return PathResult([], None, order)


def best_first(
    graph: Graph, heuristic: Mapping[int, int], start: int, goal: int
) -> PathResult:
    """Greedy search always expanding the node with the lowest heuristic."""
    _require(graph, start)
    _require(graph, goal)
    tie = count()
    heap = [(_estimate(heuristic, start), next(tie), start)]
    visited: set[int] = set()
    order: list[int] = []
    parent: dict[int, int] = {}
    while heap:
        _, _, node = heapq.heappop(heap)
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        if node == goal:
            return PathResult(_trace(parent, goal), None, order)
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                parent[neighbor] = node
                heapq.heappush(
                    heap, (_estimate(heuristic, neighbor), next(tie), neighbor)
                )
    return PathResult([], None, order)


def hill_climbing(
    graph: Graph, heuristic: Mapping[int, int], start: int, goal: int
) -> PathResult:
    """Move to the strictly best neighbour until the goal is reached.

    Raises LocalOptimumError when no neighbour improves on the current node.
    """
    _require(graph, start)
    _require(graph, goal)
    current = start
    path = [current]
    while current != goal:
        best: int | None = None
        best_h = _estimate(heuristic, current)
        for neighbor in graph.neighbors(current):
            value = _estimate(heuristic, neighbor)
            if value < best_h:
                best_h = value
                best = neighbor
        if best is None:
            raise LocalOptimumError(current, path)
        current = best
        path.append(current)
    return PathResult(path, None, list(path))