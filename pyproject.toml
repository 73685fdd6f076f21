[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphkeeper"
version = "0.1.0"
description = "Interactive directed weighted graph editor with traversal, path search and Graphviz export"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "directed graph",
    "shortest path",
    "bellman-ford",
    "floyd-warshall",
    "breadth-first search",
    "graphviz",
    "hash table",
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
graphkeeper = "graphkeeper.dialog:main"

[tool.hatch.build.targets.wheel]
packages = ["graphkeeper"]

[tool.pytest.ini_options]
addopts = "-ra"
