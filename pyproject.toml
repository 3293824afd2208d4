[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pqbench"
version = "0.1.0"
description = "Binary-heap and sorted-linked-list priority queues with timing benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "linked list", "benchmark", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pqbench-heap = "pqbench.heap_bench:main"
pqbench-list = "pqbench.list_bench:main"

[tool.hatch.build.targets.wheel]
packages = ["pqbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
