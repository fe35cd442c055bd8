# graphsearch

Textbook graph search algorithms over small integer-numbered graphs, usable
as a library or from the command line, plus a simple grid-cleaning robot.

## Installation

```
pip install .
```

## The graph

`graphsearch.graph.Graph(node_count, directed=False)` holds an adjacency list
for the nodes `0` through `node_count`. `add_edge(u, v, weight=1)` adds an
edge (and the reverse edge unless the graph is directed); a node outside
that range raises `ValueError`. `neighbors(node)` and
`weighted_neighbors(node)` return neighbours in the order their edges were
added, which fixes the order every search visits them in. `nodes()` iterates
over all node numbers, and `node in graph` / `len(graph)` work as expected.

## Uninformed search (`graphsearch.uninformed`)

- `bfs(graph, start)` – nodes reachable from `start` in breadth-first order.
- `dfs(graph, start)` – stack-based depth-first order; a node is marked
  visited when it is pushed, so neighbours come off the stack in reverse
  order of insertion.
- `depth_limited(graph, start, limit)` – the same walk, but nodes at depth
  `limit` are not expanded.
- `iterative_deepening(graph, start, goal, max_depth)` – runs
  `depth_limited` with limits `0..max_depth` until `goal` appears. Returns a
  `DeepeningResult` with `traversals` (one visiting order per limit tried),
  `found_depth` (the limit at which the goal appeared, or `None`) and `found`.
- `bidirectional_meeting(graph, start, goal)` – breadth-first search from
  both ends, one level at a time; returns the node where the frontiers meet,
  or `None`.
- `uniform_cost(graph, start)` – `(node, cost)` pairs in the order uniform
  cost search settles them.

A start or goal node not in the graph raises `ValueError`.

## Informed search (`graphsearch.informed`)

Each takes a mapping `heuristic` from node to estimate; nodes missing from
it count as `0`. Each returns a `PathResult` with `path` (start to goal,
empty if the goal was not reached), `cost` (total edge cost for `a_star`,
otherwise `None`), `visited` (nodes in expansion order) and `found`.

- `a_star(graph, heuristic, start, goal)` – expands by `f = g + h`.
- `best_first(graph, heuristic, start, goal)` – greedy, expands by `h` alone.
- `hill_climbing(graph, heuristic, start, goal)` – moves to the neighbour
  with the lowest heuristic as long as it is strictly lower than the
  current node's; otherwise raises `LocalOptimumError`, whose `node` and
  `path` attributes say where it got stuck.

## Vacuum cleaner (`graphsearch.vacuum`)

`clean_steps(grid)` walks a grid of characters row by row and, for every
dirty cell (`D`), marks it clean (`C`) and yields a `CleaningStep` with
`row`, `col`, `position` and a snapshot `grid` of the state after cleaning.
The grid passed in is left unchanged. `format_grid(grid)` renders a grid
with cells separated by spaces, one row per line.

## Library use

```python
from graphsearch.graph import Graph
from graphsearch.uninformed import bfs, uniform_cost
from graphsearch.informed import a_star

graph = Graph(4)
graph.add_edge(1, 2, 1)
graph.add_edge(2, 3, 4)
graph.add_edge(1, 3, 7)
graph.add_edge(3, 4, 1)

bfs(graph, 1)           # [1, 2, 3, 4]
uniform_cost(graph, 1)  # [(1, 0), (2, 1), (3, 5), (4, 6)]

result = a_star(graph, {1: 5, 2: 4, 3: 1, 4: 0}, 1, 4)
result.path, result.cost  # ([1, 2, 3, 4], 6)
```

## Command line

```
graphsearch COMMAND [--directed] < problem.txt
```

Commands: `bfs`, `dfs`, `dls`, `ids`, `bidirectional`, `ucs`, `astar`,
`best-first`, `hill` and `vacuum`. All but `vacuum` accept `--directed` to
treat each edge as one-way.

The problem is read from standard input as whitespace-separated values, in
the order the prompts ask for them:

- the number of nodes and of edges, then each edge as `u v`
  (`u v cost` for `ucs` and `astar`);
- for `astar`, `best-first` and `hill`, one `node h` pair per node;
- then the start node and, where needed, the goal node, depth limit
  (`dls`) or maximum depth (`ids`).

For `vacuum`, give the number of rows and columns followed by the grid's
characters; each cleaned cell is reported and the grid is printed after it.

Malformed or missing input, or a node outside the graph, prints an error to
standard error and exits with status 1. `graphsearch --help` lists the
commands.

## What it does not do

Graphs come only from code or standard input; there is no file format,
no graph drawing and no saving of results.

## Running the tests

```
pip install .[test]
pytest
```