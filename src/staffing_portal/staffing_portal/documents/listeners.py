from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .store import Document

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[list["Document"]], None]
ErrorCallback = Callable[[Exception], None]
Unsubscribe = Callable[[], None]


@dataclass(eq=False)
class _Subscription:
    collection: str
    callback: SnapshotCallback
    on_error: Optional[ErrorCallback]


class ListenerRegistry:
    """Per-collection subscriber lists for live snapshot updates.

    Callbacks run on the writer's thread, after the write has been committed.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subs: dict[str, list[_Subscription]] = {}

    def subscribe(
        self,
        collection: str,
        callback: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Unsubscribe:
        sub = _Subscription(collection=collection, callback=callback, on_error=on_error)
        with self._lock:
            self._subs.setdefault(collection, []).append(sub)

        def unsubscribe() -> None:
            with self._lock:
                subs = self._subs.get(collection, [])
                if sub in subs:
                    subs.remove(sub)
                if not subs:
                    self._subs.pop(collection, None)

        return unsubscribe

    def has_subscribers(self, collection: str) -> bool:
        with self._lock:
            return bool(self._subs.get(collection))

    def notify(self, collection: str, load_snapshot: Callable[[], list["Document"]]) -> None:
        with self._lock:
            subs = list(self._subs.get(collection, []))
        if not subs:
            return

        try:
            snapshot = load_snapshot()
        except Exception as e:
            logger.exception("Failed to load snapshot for %s", collection)
            for sub in subs:
                self._report(sub.on_error, e, collection)
            return

        for sub in subs:
            try:
                sub.callback(list(snapshot))
            except Exception as e:
                self._report(sub.on_error, e, collection)

    def deliver(
        self,
        callback: SnapshotCallback,
        on_error: Optional[ErrorCallback],
        load_snapshot: Callable[[], list["Document"]],
    ) -> None:
        """Send the current snapshot to a single (new) subscriber."""
        try:
            callback(load_snapshot())
        except Exception as e:
            self._report(on_error, e, "initial snapshot")

    @staticmethod
    def _report(on_error: Optional[ErrorCallback], error: Exception, collection: str) -> None:
        if on_error is None:
            logger.error("Listener for %s failed: %s", collection, error, exc_info=error)
            return
        try:
            on_error(error)
        except Exception:
            logger.exception("Error handler for %s listener failed", collection)
