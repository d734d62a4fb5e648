from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence

from .listeners import ErrorCallback, ListenerRegistry, SnapshotCallback, Unsubscribe


@dataclass(frozen=True)
class Document:
    """One stored document: its id inside the collection plus the JSON payload."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


def new_doc_id() -> str:
    return uuid.uuid4().hex


class DocumentStore(Protocol):
    """Thin interface over the hierarchical document database.

    Paths are two levels deep: ``<collection>/<doc_id>``. Services depend on this
    interface, never on a concrete backend.
    """

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        raise NotImplementedError

    def list(self, collection: str) -> Sequence[Document]:
        raise NotImplementedError

    def add(self, collection: str, data: dict) -> str:
        raise NotImplementedError

    def set(self, collection: str, doc_id: str, data: dict, *, merge: bool = False) -> None:
        raise NotImplementedError

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        """Shallow-merge ``data`` into an existing document (NotFoundError if missing)."""

        raise NotImplementedError

    def delete(self, collection: str, doc_id: str) -> bool:
        raise NotImplementedError

    def subscribe(
        self,
        collection: str,
        callback: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Unsubscribe:
        raise NotImplementedError


class BaseDocumentStore(ABC):
    """Shared listener plumbing for concrete stores.

    Subclasses call ``_publish`` after every successful write.
    """

    def __init__(self, listeners: Optional[ListenerRegistry] = None):
        self._listeners = listeners or ListenerRegistry()

    @abstractmethod
    def list(self, collection: str) -> Sequence[Document]:
        raise NotImplementedError

    def subscribe(
        self,
        collection: str,
        callback: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Unsubscribe:
        unsubscribe = self._listeners.subscribe(collection, callback, on_error)
        self._listeners.deliver(callback, on_error, lambda: list(self.list(collection)))
        return unsubscribe

    def _publish(self, collection: str) -> None:
        if not self._listeners.has_subscribers(collection):
            return
        self._listeners.notify(collection, lambda: list(self.list(collection)))
