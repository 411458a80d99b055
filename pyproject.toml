[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dspractice"
version = "0.1.0"
description = "Classic data structures and algorithms: array helpers, searching, sorting, linked lists, stacks, queues, binary tree traversals, Tower of Hanoi, polynomials and mark sheets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "sorting",
    "searching",
    "linked list",
    "stack",
    "queue",
    "binary tree",
    "tower of hanoi",
    "polynomial",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dspractice"]

[tool.pytest.ini_options]
addopts = "-ra"
