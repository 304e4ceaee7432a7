[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "0.1.0"
description = "Generic data structures with optional locking: sets, heaps, priority queues, LRU and LFU caches, directed graphs and search trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "set",
    "heap",
    "priority queue",
    "lru",
    "lfu",
    "cache",
    "graph",
    "bfs",
    "dfs",
    "bst",
    "avl",
    "red-black tree",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
