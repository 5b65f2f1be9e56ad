"""In-memory object store shared by workers and the scheduler."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

ObjectId = str
OnPutCallback = Callable[[ObjectId], None]


@dataclass(frozen=True)
class ObjectRef:
    """A handle naming an object that is, or will be, in the store."""

    id: ObjectId


class ObjectStore:
    """Thread-safe mapping of object ids to values.

    Readers may block until an object appears; an optional callback is
    invoked after every ``put`` so that a scheduler can react.
    """

    def __init__(self) -> None:
        self._objects: Dict[ObjectId, Any] = {}
        self._cond = threading.Condition()
        self._on_put: Optional[OnPutCallback] = None

    def put(self, object_id: ObjectId, value: Any) -> None:
        """Store ``value`` under ``object_id`` and wake any waiters."""
        with self._cond:
            self._objects[object_id] = value
            self._cond.notify_all()
        callback = self._on_put
        if callback is not None:
            callback(object_id)

    def get(self, object_id: ObjectId) -> Any:
        """Return the stored value, or ``None`` if there is none yet."""
        with self._cond:
            return self._objects.get(object_id)

    def get_blocking(self, object_id: ObjectId, timeout: Optional[float] = None) -> Any:
        """Wait until ``object_id`` exists and return its value.

        Raises ``TimeoutError`` if ``timeout`` seconds pass first.
        """
        with self._cond:
            found = self._cond.wait_for(lambda: object_id in self._objects, timeout)
            if not found:
                raise TimeoutError(f"object {object_id!r} did not appear in time")
            return self._objects[object_id]

    def set_on_put_callback(self, callback: Optional[OnPutCallback]) -> None:
        """Register the function called with each newly stored id."""
        self._on_put = callback

    def __contains__(self, object_id: object) -> bool:
        with self._cond:
            return object_id in self._objects