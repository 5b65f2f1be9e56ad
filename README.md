# orionflow

A small dataflow task runtime built on threads.

It has three parts:

- **`ObjectStore`** (`orionflow.object_store`): a thread-safe in-memory map
  from object ids (strings) to values. `put` stores a value, wakes anyone
  waiting for it and then calls the registered on-put callback with the id.
  `get` returns the value, or `None` if it is not there yet.
  `get_blocking(object_id, timeout=None)` waits until the object appears and
  raises `TimeoutError` if `timeout` seconds pass first. `object_id in store`
  tells whether an object exists. `ObjectRef` is a frozen handle holding an
  object id.
- **`Worker`** (`orionflow.worker`): runs tasks in submission order on its own
  background thread. Before a task runs, the worker waits for the values of
  the task's dependencies in the store. It then stores the task's result
  under the task's id. `submit` returns an `ObjectRef` to that result.
- **`Scheduler`** (`orionflow.scheduler`): holds tasks until all of their
  dependencies are in the store, then hands ready tasks to the workers in
  round-robin order. It registers itself as the store's on-put callback, so
  each new object releases waiting tasks and dispatches them without any
  extra calls. It needs at least one worker and raises `ValueError` otherwise.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no runtime dependencies.
For the tests, install the `test` extra: `pip install .[test]`.

## Usage

```python
from orionflow.object_store import ObjectRef, ObjectStore
from orionflow.task import Task
from orionflow.worker import Worker
from orionflow.scheduler import Scheduler

store = ObjectStore()
with Worker(store) as w1, Worker(store) as w2:
    scheduler = Scheduler([w1, w2], store)

    scheduler.submit(Task("a", [], lambda args: 20))
    scheduler.submit(Task("b", [ObjectRef("a")], lambda args: args[0] + 22))
    scheduler.schedule()

    print(store.get_blocking("b"))  # 42
```

### Tasks

`Task(id, deps, work)` (`orionflow.task`) names a unit of work. `deps` may
hold `ObjectRef`s or plain id strings; they are kept as a tuple of
`ObjectRef`s. `work` either takes one argument, a list of the dependency
values in the same order as `deps`, or takes no arguments at all, in which
case it is called with none. `Task.run(args)` calls the work with the given
values.

### Workers

Entering a `Worker` as a context manager starts it, and leaving the block
stops it. You can also call `start()` and `stop()` yourself; `start()` raises
`RuntimeError` if the worker's thread is already running. `stop()` lets the
worker finish any tasks still in its queue before its thread exits. Both
print a short line ("Starting worker thread...", "Stopping worker thread.").

`Scheduler.submit` only queues a task; call `schedule()` to dispatch the
tasks that are ready. Tasks released later by new objects are dispatched
automatically.

## Demo

The package installs a command that runs two CPU-bound tasks on two workers
and prints how long they took, in milliseconds:

```
orionflow-demo
orionflow-demo --duration 0.5
```

`--duration` sets how many seconds each task spins (default 1.0; it must not
be negative). The same run is available from Python as
`orionflow.cli.run_demo(duration=1.0)`, which returns the elapsed
milliseconds, and `orionflow.cli.busy_task(seconds)` builds the spinning work
function.

## What it does not do

Everything runs in one process, on threads. There is no distribution across
processes or machines, and the object store lives in memory only: nothing is
saved. A task whose work raises an exception does not store a result, and the
worker's thread ends; anyone waiting for that result with `get_blocking` and
no timeout waits forever.