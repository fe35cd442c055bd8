"""Command-line front end: reads a problem from standard input and runs a search."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable

from graphsearch.graph import Graph
from graphsearch.informed import LocalOptimumError, a_star, best_first, hill_climbing
from graphsearch.uninformed import (
    bfs,
    bidirectional_meeting,
    depth_limited,
    dfs,
    iterative_deepening,
    uniform_cost,
)
from graphsearch.vacuum import clean_steps, format_grid

_SPACE = re.compile(r"\s*")
_INTEGER = re.compile(r"[+-]?\d+")


class InputError(ValueError):
    """The input ended early or held something other than what was expected."""


class _Scanner:
    """Reads whitespace-separated integers and single characters from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip(self) -> None:
        self._pos = _SPACE.match(self._text, self._pos).end()

    def integer(self) -> int:
        self._skip()
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            if self._pos >= len(self._text):
                raise InputError("unexpected end of input, expected an integer")
            raise InputError(f"expected an integer at offset {self._pos}")
        self._pos = match.end()
        return int(match.group())

    def char(self) -> str:
        self._skip()
        if self._pos >= len(self._text):
            raise InputError("unexpected end of input, expected a character")
        ch = self._text[self._pos]
        self._pos += 1
        return ch


def _join(values) -> str:
    return " ".join(str(value) for value in values)


def _read_graph(scanner: _Scanner, directed: bool, weighted: bool) -> Graph:
    print("Enter number of nodes and edges: ", end="")
    node_count = scanner.integer()
    edge_count = scanner.integer()
    graph = Graph(node_count, directed)
    print("Enter edges (u v cost):" if weighted else "Enter edges (u v):")
    for _ in range(edge_count):
        u = scanner.integer()
        v = scanner.integer()
        weight = scanner.integer() if weighted else 1
        graph.add_edge(u, v, weight)
    return graph


def _read_heuristic(scanner: _Scanner, graph: Graph) -> dict[int, int]:
    print("Enter heuristic for each node (node h):")
    heuristic: dict[int, int] = {}
    for _ in range(graph.node_count):
        node = scanner.integer()
        heuristic[node] = scanner.integer()
    return heuristic


def _read_start(scanner: _Scanner) -> int:
    print("Enter starting node: ", end="")
    return scanner.integer()


def _read_start_goal(scanner: _Scanner) -> tuple[int, int]:
    print("Enter start and goal nodes: ", end="")
    return scanner.integer(), scanner.integer()


def _run_bfs(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=False)
    start = _read_start(scanner)
    print("BFS traversal: " + _join(bfs(graph, start)))


def _run_dfs(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=False)
    start = _read_start(scanner)
    print("DFS traversal: " + _join(dfs(graph, start)))


def _run_dls(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=False)
    start = _read_start(scanner)
    print("Enter depth limit: ", end="")
    limit = scanner.integer()
    order = depth_limited(graph, start, limit)
    print(f"DLS traversal (limit={limit}): " + _join(order))


def _run_ids(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=False)
    start = _read_start(scanner)
    print("Enter goal node: ", end="")
    goal = scanner.integer()
    print("Enter maximum depth: ", end="")
    max_depth = scanner.integer()
    print(f"Iterative Deepening Search from {start} to {goal}:")
    result = iterative_deepening(graph, start, goal, max_depth)
    for limit, traversal in enumerate(result.traversals):
        print(f"Depth limit = {limit}")
        print("  DLS traversal: " + _join(traversal))
    if result.found:
        print(f"Goal node {goal} found at depth {result.found_depth}")
    else:
        print(f"Goal node not found within maximum depth {max_depth}")


def _run_bidirectional(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=False)
    start = _read_start(scanner)
    print("Enter goal node: ", end="")
    goal = scanner.integer()
    meeting = bidirectional_meeting(graph, start, goal)
    if meeting is None:
        print("No path found.")
    else:
        print(f"Path meets at node: {meeting}")
        print(f"Path found between {start} and {goal}")


def _run_ucs(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=True)
    start = _read_start(scanner)
    order = uniform_cost(graph, start)
    print(
        "Uniform Cost Search Traversal: "
        + " ".join(f"{node} (cost: {cost})" for node, cost in order)
    )


def _run_astar(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=True)
    heuristic = _read_heuristic(scanner, graph)
    start, goal = _read_start_goal(scanner)
    result = a_star(graph, heuristic, start, goal)
    if result.found:
        print(f"Goal found with total cost: {result.cost}")
        print("Path: " + _join(result.path))
    else:
        print("Goal not reachable from start node.")


def _run_best_first(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=False)
    heuristic = _read_heuristic(scanner, graph)
    start, goal = _read_start_goal(scanner)
    result = best_first(graph, heuristic, start, goal)
    for node in result.visited:
        print(f"Visiting: {node}")
    if result.found:
        print("Goal found!")
        print("Path: " + _join(result.path))
    else:
        print("Goal not reachable.")


def _run_hill(scanner: _Scanner, args: argparse.Namespace) -> None:
    graph = _read_graph(scanner, args.directed, weighted=False)
    heuristic = _read_heuristic(scanner, graph)
    start, goal = _read_start_goal(scanner)
    try:
        result = hill_climbing(graph, heuristic, start, goal)
    except LocalOptimumError:
        print("Stuck at local optimum. Search failed.")
        return
    print("Goal reached using Hill Climbing!")
    print("Path: " + _join(result.path))


def _run_vacuum(scanner: _Scanner, args: argparse.Namespace) -> None:
    print("Enter the number of rows and columns: ")
    rows = scanner.integer()
    cols = scanner.integer()
    print("Enter the elements of the array: ")
    grid = [[scanner.char() for _ in range(cols)] for _ in range(rows)]
    for step in clean_steps(grid):
        print(f"Cleaning at position: ({step.row}, {step.col})")
        print(f"for dirt: {step.row} {step.col}")
        print(format_grid(step.grid))


_GRAPH_COMMANDS: dict[str, tuple[Callable[[_Scanner, argparse.Namespace], None], str]] = {
    "bfs": (_run_bfs, "breadth-first traversal"),
    "dfs": (_run_dfs, "depth-first traversal"),
    "dls": (_run_dls, "depth-limited traversal"),
    "ids": (_run_ids, "iterative deepening search"),
    "bidirectional": (_run_bidirectional, "bidirectional breadth-first search"),
    "ucs": (_run_ucs, "uniform cost search"),
    "astar": (_run_astar, "A* search"),
    "best-first": (_run_best_first, "greedy best-first search"),
    "hill": (_run_hill, "hill climbing"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphsearch",
        description="Run a search algorithm on a problem read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    graph_options = argparse.ArgumentParser(add_help=False)
    graph_options.add_argument(
        "--directed",
        action="store_true",
        help="treat each edge as one-way",
    )
    for name, (handler, summary) in _GRAPH_COMMANDS.items():
        sub = commands.add_parser(name, parents=[graph_options], help=summary)
        sub.set_defaults(handler=handler)
    vacuum = commands.add_parser("vacuum", help="clean the dirty cells of a grid")
    vacuum.set_defaults(handler=_run_vacuum)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, read the problem from standard input and solve it."""
    args = _build_parser().parse_args(argv)
    scanner = _Scanner(sys.stdin.read())
    try:
        args.handler(scanner, args)
    except ValueError as exc:
        print(file=sys.stdout)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())