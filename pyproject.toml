[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "graphsearch"
version = "0.1.0"
description = "Classic graph search algorithms (BFS, DFS, depth-limited, iterative deepening, bidirectional, uniform cost, A*, best-first, hill climbing) and a grid vacuum-cleaner agent."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "search",
    "bfs",
    "dfs",
    "a-star",
    "uniform-cost",
    "hill-climbing",
    "artificial-intelligence",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphsearch = "graphsearch.cli:main"

[tool.setuptools.packages.find]
include = ["graphsearch*"]

[tool.pytest.ini_options]
addopts = "-ra"
