[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samplestore"
version = "0.1.0"
description = "A small data-access layer for a table of named samples, run through any object that executes $n-placeholder queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "sql", "repository", "postgresql", "samples"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["samplestore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
