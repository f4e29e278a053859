[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "graphalgo"
version = "0.1.0"
description = "Classic graph algorithms: spanning trees, shortest paths, maximum flow and addressable priority queues"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "minimum spanning tree",
    "shortest path",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "max flow",
    "edmonds-karp",
    "bipartite matching",
    "baseball elimination",
    "fibonacci heap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphalgo = "graphalgo.cli:main"
graphalgo-baseball = "graphalgo.baseball:main"

[tool.setuptools.packages.find]
include = ["graphalgo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
