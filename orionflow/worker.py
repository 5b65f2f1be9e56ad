"""A worker thread that executes tasks and stores their results."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Optional, Tuple

from .object_store import ObjectRef, ObjectStore
from .task import Task


class Worker:
    """Runs submitted tasks in order on a background thread.

    A worker makes no scheduling decisions: it waits for each task's
    dependencies in the store, runs it, and stores the result under the
    task's id.
    """

    def __init__(self, store: ObjectStore) -> None:
        self._store = store
        self._queue: Deque[Tuple[Task, ObjectRef]] = deque()
        self._cond = threading.Condition()
        self._running = False
        self._thread: Optional[threading.Thread] = None

    def submit(self, task: Task) -> ObjectRef:
        """Queue ``task`` and return a reference to its future result."""
        ref = ObjectRef(task.id)
        with self._cond:
            self._queue.append((task, ref))
            self._cond.notify()
        return ref

    def start(self) -> None:
        """Start the background thread."""
        with self._cond:
            if self._thread is not None and self._thread.is_alive():
                raise RuntimeError("worker already started")
            self._running = True
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()
        print("Starting worker thread...", flush=True)

    def stop(self) -> None:
        """Finish queued tasks, then stop the background thread."""
        with self._cond:
            self._running = False
            self._cond.notify_all()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
            self._thread = None
        print("Stopping worker thread.", flush=True)

    def __enter__(self) -> "Worker":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _run_loop(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._queue or not self._running)
                if not self._queue:
                    return
                item = self._queue.popleft()
            self._run_one(*item)

    def _run_one(self, task: Task, ref: ObjectRef) -> None:
        args = [self._store.get_blocking(dep.id) for dep in task.deps]
        result = task.run(args)
        self._store.put(ref.id, result)