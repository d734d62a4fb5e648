from __future__ import annotations

import copy
import threading
from typing import Optional, Sequence

from ..core.exceptions import NotFoundError
from .listeners import ListenerRegistry
from .store import BaseDocumentStore, Document, new_doc_id


class InMemoryDocumentStore(BaseDocumentStore):
    """Process-local document store used in development and tests.

    Documents are deep-copied on the way in and out so callers never share state
    with the store.
    """

    def __init__(self, listeners: Optional[ListenerRegistry] = None):
        super().__init__(listeners)
        self._lock = threading.RLock()
        self._data: dict[str, dict[str, dict]] = {}

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        with self._lock:
            data = self._data.get(collection, {}).get(doc_id)
            if data is None:
                return None
            return Document(id=doc_id, data=copy.deepcopy(data))

    def list(self, collection: str) -> Sequence[Document]:
        with self._lock:
            docs = self._data.get(collection, {})
            return [Document(id=doc_id, data=copy.deepcopy(data)) for doc_id, data in docs.items()]

    def add(self, collection: str, data: dict) -> str:
        doc_id = new_doc_id()
        with self._lock:
            self._data.setdefault(collection, {})[doc_id] = copy.deepcopy(data)
        self._publish(collection)
        return doc_id

    def set(self, collection: str, doc_id: str, data: dict, *, merge: bool = False) -> None:
        with self._lock:
            docs = self._data.setdefault(collection, {})
            if merge and doc_id in docs:
                docs[doc_id].update(copy.deepcopy(data))
            else:
                docs[doc_id] = copy.deepcopy(data)
        self._publish(collection)

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        with self._lock:
            docs = self._data.get(collection, {})
            if doc_id not in docs:
                raise NotFoundError(f"{collection}/{doc_id} does not exist")
            docs[doc_id].update(copy.deepcopy(data))
        self._publish(collection)

    def delete(self, collection: str, doc_id: str) -> bool:
        with self._lock:
            removed = self._data.get(collection, {}).pop(doc_id, None) is not None
        if removed:
            self._publish(collection)
        return removed
