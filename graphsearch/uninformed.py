"""Uninformed graph searches: breadth-first, depth-first and their relatives."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass, field

from graphsearch.graph import Graph


def _require(graph: Graph, node: int) -> None:
    if node not in graph:
        raise ValueError(f"node {node!r} is not in the graph")


def bfs(graph: Graph, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    _require(graph, start)
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def _limited_walk(graph: Graph, start: int, limit: int | None) -> list[int]:
    """Stack-based walk marking nodes when pushed, expanding up to ``limit``."""
    _require(graph, start)
    visited = {start}
    stack = [(start, 0)]
    order: list[int] = []
    while stack:
        node, depth = stack.pop()
        order.append(node)
        if limit is not None and depth >= limit:
            continue
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append((neighbor, depth + 1))
    return order


def dfs(graph: Graph, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in stack-based depth-first order."""
    return _limited_walk(graph, start, None)


def depth_limited(graph: Graph, start: int, limit: int) -> list[int]:
    """Depth-first traversal that expands no node deeper than ``limit``."""
    return _limited_walk(graph, start, limit)


@dataclass
class DeepeningResult:
    """Outcome of an iterative deepening search.

    ``traversals[d]`` is the visiting order at depth limit ``d``;
    ``found_depth`` is the limit at which the goal appeared, or ``None``.
    """

    traversals: list[list[int]] = field(default_factory=list)
    found_depth: int | None = None

    @property
    def found(self) -> bool:
        return self.found_depth is not None


def iterative_deepening(
    graph: Graph, start: int, goal: int, max_depth: int
) -> DeepeningResult:
    """Run depth-limited walks with limits 0..``max_depth`` until ``goal`` is seen."""
    result = DeepeningResult()
    for limit in range(max_depth + 1):
        traversal = depth_limited(graph, start, limit)
        result.traversals.append(traversal)
        if goal in traversal:
            result.found_depth = limit
            break
    return result


def bidirectional_meeting(graph: Graph, start: int, goal: int) -> int | None:
    """Search from both ends at once; return the meeting node or ``None``."""
    _require(graph, start)
    _require(graph, goal)
    visited_start = {start}
    visited_goal = {goal}
    queue_start = deque([start])
    queue_goal = deque([goal])

    def expand(queue: deque[int], own: set[int], other: set[int]) -> int | None:
        for _ in range(len(queue)):
            current = queue.popleft()
            if current in other:
                return current
            for neighbor in graph.neighbors(current):
                if neighbor not in own:
                    own.add(neighbor)
                    queue.append(neighbor)
        return None

    while queue_start and queue_goal:
        met = expand(queue_start, visited_start, visited_goal)
        if met is not None:
            return met
        met = expand(queue_goal, visited_goal, visited_start)
        if met is not None:
            return met
    return None


def uniform_cost(graph: Graph, start: int) -> list[tuple[int, int]]:
    """Return ``(node, cost)`` pairs in the order uniform cost search settles them."""
    _require(graph, start)
    heap: list[tuple[int, int]] = [(0, start)]
    settled: set[int] = set()
    order: list[tuple[int, int]] = []
    while heap:
        cost, node = heapq.heappop(heap)
        if node in settled:
            continue
        settled.add(node)
        order.append((node, cost))
        for neighbor, weight in graph.weighted_neighbors(node):
            if neighbor not in settled:
                heapq.heappush(heap, (cost + weight, neighbor))
    return order