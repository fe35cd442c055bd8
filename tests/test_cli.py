import io
import sys

import pytest

from graphsearch.cli import main
from graphsearch.graph import Graph
from graphsearch.informed import a_star
from graphsearch.uninformed import bfs, dfs, uniform_cost
from graphsearch.vacuum import clean_steps, format_grid


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def _tree():
    graph = Graph(4)
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    return graph


TREE_INPUT = "4 3\n1 2\n1 3\n2 4\n"


def test_bfs_prints_traversal(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["bfs"], TREE_INPUT + "1\n")
    assert code == 0
    expected = " ".join(map(str, bfs(_tree(), 1)))
    assert out.rstrip().endswith("BFS traversal: " + expected)


def test_dfs_prints_traversal(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["dfs"], TREE_INPUT + "1\n")
    assert code == 0
    assert "DFS traversal: " + " ".join(map(str, dfs(_tree(), 1))) in out


def test_dls_shows_limit(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["dls"], TREE_INPUT + "1 0\n")
    assert code == 0
    assert "DLS traversal (limit=0): 1\n" in out


def test_ids_reports_missing_goal(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["ids"], TREE_INPUT + "1 4 0\n")
    assert code == 0
    assert "Goal node not found within maximum depth 0" in out
    assert out.count("Depth limit = ") == 1


def test_ids_reports_found_goal(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["ids"], TREE_INPUT + "1 4 5\n")
    assert code == 0
    assert "Goal node 4 found at depth" in out


def test_bidirectional_no_path(monkeypatch, capsys):
    code, out, _ = _run(
        monkeypatch, capsys, ["bidirectional"], "3 1\n1 2\n1\n3\n"
    )
    assert code == 0
    assert "No path found." in out


def test_bidirectional_path(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["bidirectional"], TREE_INPUT + "3\n4\n")
    assert code == 0
    assert "Path meets at node: " in out
    assert "Path found between 3 and 4" in out


def test_ucs_prints_costs(monkeypatch, capsys):
    graph = Graph(3)
    graph.add_edge(1, 2, 4)
    graph.add_edge(2, 3, 1)
    code, out, _ = _run(monkeypatch, capsys, ["ucs"], "3 2\n1 2 4\n2 3 1\n1\n")
    assert code == 0
    expected = " ".join(f"{n} (cost: {c})" for n, c in uniform_cost(graph, 1))
    assert "Uniform Cost Search Traversal: " + expected in out


def test_astar_prints_cost_and_path(monkeypatch, capsys):
    graph = Graph(3)
    graph.add_edge(1, 2, 2)
    graph.add_edge(2, 3, 2)
    heuristic = {1: 3, 2: 1, 3: 0}
    text = "3 2\n1 2 2\n2 3 2\n1 3\n2 1\n3 0\n1 3\n"
    code, out, _ = _run(monkeypatch, capsys, ["astar"], text)
    result = a_star(graph, heuristic, 1, 3)
    assert code == 0
    assert f"Goal found with total cost: {result.cost}" in out
    assert "Path: " + " ".join(map(str, result.path)) in out


def test_astar_unreachable(monkeypatch, capsys):
    text = "3 1\n1 2 1\n1 0\n2 0\n3 0\n1 3\n"
    code, out, _ = _run(monkeypatch, capsys, ["astar"], text)
    assert code == 0
    assert "Goal not reachable from start node." in out


def test_best_first_visits_and_path(monkeypatch, capsys):
    text = TREE_INPUT + "1 3\n2 1\n3 2\n4 0\n1 4\n"
    code, out, _ = _run(monkeypatch, capsys, ["best-first"], text)
    assert code == 0
    assert "Visiting: 1" in out
    assert "Goal found!" in out


def test_hill_stuck(monkeypatch, capsys):
    text = "3 2\n1 2\n2 3\n1 1\n2 5\n3 0\n1 3\n"
    code, out, _ = _run(monkeypatch, capsys, ["hill"], text)
    assert code == 0
    assert "Stuck at local optimum. Search failed." in out


def test_hill_success(monkeypatch, capsys):
    text = "3 2\n1 2\n2 3\n1 3\n2 2\n3 0\n1 3\n"
    code, out, _ = _run(monkeypatch, capsys, ["hill"], text)
    assert code == 0
    assert "Goal reached using Hill Climbing!" in out
    assert "Path: 1 2 3" in out


def test_directed_flag_limits_edges(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["bfs", "--directed"], "2 1\n1 2\n2\n")
    assert code == 0
    assert out.rstrip().endswith("BFS traversal: 2")


def test_vacuum_prints_each_step(monkeypatch, capsys):
    grid = [["D", "C"], ["C", "D"]]
    code, out, _ = _run(monkeypatch, capsys, ["vacuum"], "2 2\nD C\nCD\n")
    assert code == 0
    steps = list(clean_steps(grid))
    for step in steps:
        assert f"Cleaning at position: ({step.row}, {step.col})" in out
        assert f"for dirt: {step.row} {step.col}" in out
        assert format_grid(step.grid) in out
    assert out.count("Cleaning at position") == len(steps)


def test_truncated_input_is_an_error(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["bfs"], "4 3\n1 2\n")
    assert code == 1
    assert "error:" in err


def test_out_of_range_node_is_an_error(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["dfs"], "2 1\n1 9\n1\n")
    assert code == 1
    assert "outside the range" in err


def test_unknown_command_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["teleport"])
    assert info.value.code == 2