"""Dataflow scheduler that dispatches ready tasks to workers."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Iterable, List

from .object_store import ObjectId, ObjectStore
from .task import Task
from .worker import Worker


class Scheduler:
    """Holds tasks until their dependencies exist, then hands them out.

    Ready tasks go to the workers in round-robin order. The scheduler
    registers itself with the store so that every new object releases
    the tasks waiting on it.
    """

    def __init__(self, workers: Iterable[Worker], store: ObjectStore) -> None:
        self._workers: List[Worker] = list(workers)
        if not self._workers:
            raise ValueError("scheduler needs at least one worker")
        self._store = store
        self._next_worker = 0
        self._pending: List[Task] = []
        self._ready: Deque[Task] = deque()
        self._lock = threading.Lock()
        store.set_on_put_callback(self._on_put)

    def _on_put(self, object_id: ObjectId) -> None:
        self.on_object_created(object_id)
        self.schedule()

    def submit(self, task: Task) -> None:
        """Add a task; it becomes ready once all its dependencies exist."""
        with self._lock:
            if self._deps_ready(task):
                self._ready.append(task)
            else:
                self._pending.append(task)

    def on_object_created(self, object_id: ObjectId) -> None:
        """Move every pending task whose dependencies now exist to ready."""
        with self._lock:
            still_pending = []
            for task in self._pending:
                if self._deps_ready(task):
                    self._ready.append(task)
                else:
                    still_pending.append(task)
            self._pending = still_pending

    def schedule(self) -> None:
        """Dispatch all ready tasks to the workers in turn."""
        with self._lock:
            while self._ready:
                task = self._ready.popleft()
                worker = self._workers[self._next_worker]
                self._next_worker = (self._next_worker + 1) % len(self._workers)
                worker.submit(task)

    def _deps_ready(self, task: Task) -> bool:
        return all(ref.id in self._store for ref in task.deps)