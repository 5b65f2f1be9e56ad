"""Demo command: run two CPU-bound tasks on two workers and time them."""

from __future__ import annotations

import argparse
import time
from typing import Callable, List, Optional

from .object_store import ObjectStore
from .scheduler import Scheduler
from .task import Task
from .worker import Worker


def busy_task(seconds: float) -> Callable[[List[object]], int]:
    """Return work that spins the CPU for ``seconds`` and returns 1."""

    def work(_args: List[object]) -> int:
        start = time.monotonic()
        while time.monotonic() - start < seconds:
            pass
        return 1

    return work


def run_demo(duration: float = 1.0) -> int:
    """Run two busy tasks on two workers; return elapsed milliseconds."""
    store = ObjectStore()
    workers = [Worker(store), Worker(store)]
    scheduler = Scheduler(workers, store)
    for worker in workers:
        worker.start()
    try:
        work = busy_task(duration)
        started = time.monotonic()
        scheduler.submit(Task("T1", [], work))
        scheduler.submit(Task("T2", [], work))
        scheduler.schedule()
        store.get_blocking("T1")
        store.get_blocking("T2")
        elapsed = time.monotonic() - started
    finally:
        for worker in workers:
            worker.stop()
    return int(elapsed * 1000)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time two busy tasks on two workers.")
    parser.add_argument(
        "--duration",
        type=float,
        default=1.0,
        help="seconds each task spins (default: 1.0)",
    )
    args = parser.parse_args(argv)
    if args.duration < 0:
        parser.error("--duration must not be negative")
    store = ObjectStore()
    workers = [Worker(store), Worker(store)]
    scheduler = Scheduler(workers, store)
    for worker in workers:
        worker.start()
    work = busy_task(args.duration)
    started = time.monotonic()
    scheduler.submit(Task("T1", [], work))
    scheduler.submit(Task("T2", [], work))
    scheduler.schedule()
    store.get_blocking("T1")
    store.get_blocking("T2")
    elapsed_ms = int((time.monotonic() - started) * 1000)
    print(f"Elapsed time: {elapsed_ms} ms", flush=True)
    for worker in workers:
        worker.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())