[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintrees-lab"
version = "0.1.0"
description = "Teaching implementations of a linked binary tree and a binary search tree, with Graphviz dot export"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "binary search tree", "data structures", "graphviz", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bintrees-lab = "bintrees_lab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bintrees_lab"]

[tool.pytest.ini_options]
addopts = "-ra"
