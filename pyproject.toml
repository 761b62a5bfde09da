[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgos"
version = "0.1.0"
description = "Classic graph algorithms with command-line tools: Dijkstra, Prim, Kruskal, Kosaraju and PageRank"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "dijkstra",
    "prim",
    "kruskal",
    "kosaraju",
    "pagerank",
    "shortest-path",
    "minimum-spanning-tree",
    "strongly-connected-components",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dijkstra = "graphalgos.dijkstra:main"
prim = "graphalgos.prim:main"
kruskal = "graphalgos.kruskal:main"
kosaraju = "graphalgos.kosaraju:main"
pagerank = "graphalgos.pagerank:main"

[tool.hatch.build.targets.wheel]
packages = ["graphalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
