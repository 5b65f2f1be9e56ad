[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orionflow"
version = "0.1.0"
description = "A minimal dataflow task runtime: an in-memory object store, threaded workers and a dependency-aware scheduler."
requires-python = ">=3.10"
dependencies = []
keywords = ["dataflow", "scheduler", "tasks", "workers", "object-store", "threads"]
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
    "Topic :: System :: Distributed Computing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orionflow-demo = "orionflow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["orionflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
