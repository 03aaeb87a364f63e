[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mynosql"
version = "0.1.0"
description = "A small in-memory key-value store with string, list, sorted set and hash types"
requires-python = ">=3.10"
dependencies = []
keywords = ["nosql", "key-value", "in-memory", "skip-list", "hash-table", "database"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mynosql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
