[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures and graph algorithms: vectors, linked lists, queues, heaps, search trees, hash maps and weighted graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "vector",
    "linked-list",
    "queue",
    "priority-queue",
    "heap",
    "binary-search-tree",
    "hash-map",
    "graph",
    "dijkstra",
    "topological-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-pq-demo = "structkit.priority_queue:main"
structkit-bst-demo = "structkit.bst:main"
structkit-hash-demo = "structkit.hash_demo:main"
structkit-graph-demo = "structkit.graph_algorithms:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.hatch.build.targets.sdist]
include = ["structkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
