[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgo"
version = "0.1.0"
description = "Graph data structure with classic algorithms: shortest paths, flows, spanning trees, orderings, connectivity and Euler paths"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "shortest-path",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "max-flow",
    "spanning-tree",
    "topological-sort",
    "critical-path",
    "strongly-connected-components",
    "euler-path",
    "pairing-heap",
    "pcg",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
