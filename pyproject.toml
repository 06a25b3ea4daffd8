[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bplustree"
version = "0.1.0"
description = "An in-memory B+ tree keyed store with bulk loading, ordered iteration and insertion"
requires-python = ">=3.10"
dependencies = []
keywords = ["b+tree", "btree", "index", "storage", "database"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bplustree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
