[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtkit"
version = "0.1.0"
description = "Classic abstract data types and small algorithm exercises: lists, queues, stacks, heaps, sets, dictionaries, trees and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "abstract data types",
    "queue",
    "stack",
    "heap",
    "tree",
    "graph",
    "matrix",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
