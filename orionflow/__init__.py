"""A threaded dataflow task runtime: object store, tasks, workers and a scheduler."""

__version__ = "0.1.0"