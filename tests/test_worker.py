import pytest

from orionflow.object_store import ObjectRef, ObjectStore
from orionflow.task import Task
from orionflow.worker import Worker


def test_submit_returns_ref_named_after_task():
    store = ObjectStore()
    worker = Worker(store)
    assert worker.submit(Task("job", [], lambda: 1)) == ObjectRef("job")


def test_started_worker_stores_result():
    store = ObjectStore()
    with Worker(store) as worker:
        worker.submit(Task("job", [], lambda: "result"))
        assert store.get_blocking("job", timeout=5) == "result"


def test_dependency_values_passed_in_order():
    store = ObjectStore()
    store.put("a", 1)
    store.put("b", 10)
    with Worker(store) as worker:
        worker.submit(Task("pair", ["b", "a"], lambda args: tuple(args)))
        assert store.get_blocking("pair", timeout=5) == (10, 1)


def test_worker_waits_for_missing_dependency():
    store = ObjectStore()
    with Worker(store) as worker:
        worker.submit(Task("double", ["x"], lambda args: args[0] * 2))
        with pytest.raises(TimeoutError):
            store.get_blocking("double", timeout=0.05)
        store.put("x", 21)
        assert store.get_blocking("double", timeout=5) == 42


def test_start_twice_raises():
    store = ObjectStore()
    worker = Worker(store)
    worker.start()
    try:
        with pytest.raises(RuntimeError):
            worker.start()
    finally:
        worker.stop()


def test_lifecycle_messages(capsys):
    store = ObjectStore()
    with Worker(store):
        pass
    out = capsys.readouterr().out
    assert "Starting worker thread..." in out
    assert "Stopping worker thread." in out