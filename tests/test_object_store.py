import threading
import time

import pytest

from orionflow.object_store import ObjectRef, ObjectStore


def test_put_then_get_returns_value():
    store = ObjectStore()
    store.put("a", [1, 2])
    assert store.get("a") == [1, 2]


def test_get_missing_returns_none():
    store = ObjectStore()
    assert store.get("missing") is None
    assert "missing" not in store


def test_contains_after_put_even_for_none_value():
    store = ObjectStore()
    store.put("n", None)
    assert "n" in store


def test_put_overwrites():
    store = ObjectStore()
    store.put("a", 1)
    store.put("a", 2)
    assert store.get("a") == 2


def test_get_blocking_waits_for_other_thread():
    store = ObjectStore()

    def producer():
        time.sleep(0.05)
        store.put("late", "value")

    thread = threading.Thread(target=producer)
    thread.start()
    assert store.get_blocking("late", timeout=5) == "value"
    thread.join()


def test_get_blocking_returns_immediately_when_present():
    store = ObjectStore()
    store.put("x", 42)
    assert store.get_blocking("x") == 42


def test_get_blocking_timeout_raises():
    store = ObjectStore()
    with pytest.raises(TimeoutError):
        store.get_blocking("never", timeout=0.05)


def test_callback_receives_ids_in_order():
    store = ObjectStore()
    seen = []
    store.set_on_put_callback(seen.append)
    store.put("first", 1)
    store.put("second", 2)
    assert seen == ["first", "second"]


def test_callback_sees_value_already_stored():
    store = ObjectStore()
    observed = []
    store.set_on_put_callback(lambda object_id: observed.append(store.get(object_id)))
    store.put("k", "v")
    assert observed == ["v"]


def test_object_ref_equality_by_id():
    assert ObjectRef("a") == ObjectRef("a")
    assert ObjectRef("a").id == "a"