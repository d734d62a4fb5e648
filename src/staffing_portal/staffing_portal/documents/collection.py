from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, Mapping, Optional, Sequence, TypeVar

from ..core.exceptions import NotFoundError
from .listeners import ErrorCallback, Unsubscribe
from .store import Document, DocumentStore

T = TypeVar("T")

Converter = Callable[[Any], Any]


def model_from_document(model_cls: type[T], doc: Document, converters: Mapping[str, Converter] | None = None) -> T:
    """Build a dataclass from a document; unknown keys are ignored, missing ones use defaults."""
    converters = converters or {}
    values: dict[str, Any] = {}
    for f in dataclasses.fields(model_cls):
        if f.name == "id":
            values["id"] = doc.id
            continue
        if f.name not in doc.data:
            continue
        raw = doc.data[f.name]
        convert = converters.get(f.name)
        values[f.name] = convert(raw) if convert and raw is not None else raw
    return model_cls(**values)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def model_to_document(item: Any) -> dict[str, Any]:
    data = dataclasses.asdict(item)
    data.pop("id", None)
    return {k: _plain(v) for k, v in data.items()}


def plain_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in changes.items():
        if key == "id":
            continue
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = dataclasses.asdict(value)
        out[key] = _plain(value)
    return out


def _sort_documents(docs: list[Document], key: str, descending: bool) -> list[Document]:
    present = [d for d in docs if d.data.get(key) is not None]
    missing = [d for d in docs if d.data.get(key) is None]

    def sort_key(d: Document):
        value = d.data[key]
        return value.casefold() if isinstance(value, str) else value

    present.sort(key=sort_key, reverse=descending)
    return present + missing


class DocumentCollection(Generic[T]):
    """Typed wrapper over one collection of the document store.

    Subclasses set ``name`` and ``model`` (a dataclass with an ``id`` field) and,
    where stored values need parsing, ``converters``.
    """

    name: ClassVar[str] = ""
    model: ClassVar[type]
    converters: ClassVar[Mapping[str, Converter]] = {}

    def __init__(self, store: DocumentStore):
        self._store = store

    def _to_model(self, doc: Document) -> T:
        return model_from_document(self.model, doc, self.converters)

    def _select(
        self,
        docs: Sequence[Document],
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[T]:
        selected = list(docs)
        if where:
            plain_where = {k: _plain(v) for k, v in where.items()}
            selected = [d for d in selected if all(d.data.get(k) == v for k, v in plain_where.items())]
        if order_by:
            selected = _sort_documents(selected, order_by, descending)
        if limit is not None:
            selected = selected[: max(int(limit), 0)]
        return [self._to_model(d) for d in selected]

    def get(self, doc_id: str) -> Optional[T]:
        doc = self._store.get(self.name, str(doc_id))
        return self._to_model(doc) if doc else None

    def require(self, doc_id: str) -> T:
        item = self.get(doc_id)
        if item is None:
            raise NotFoundError(f"{self.name}/{doc_id} does not exist")
        return item

    def query(
        self,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[T]:
        return self._select(
            self._store.list(self.name),
            where=where,
            order_by=order_by,
            descending=descending,
            limit=limit,
        )

    def all(self) -> list[T]:
        return self.query()

    def first(self, **where: Any) -> Optional[T]:
        found = self.query(where=where, limit=1)
        return found[0] if found else None

    def add(self, item: T) -> T:
        doc_id = self._store.add(self.name, model_to_document(item))
        return dataclasses.replace(item, id=doc_id)

    def put(self, doc_id: str, item: T) -> T:
        self._store.set(self.name, str(doc_id), model_to_document(item))
        return dataclasses.replace(item, id=str(doc_id))

    def update(self, doc_id: str, changes: Mapping[str, Any]) -> T:
        self._store.update(self.name, str(doc_id), plain_changes(changes))
        return self.require(doc_id)

    def delete(self, doc_id: str) -> bool:
        return self._store.delete(self.name, str(doc_id))

    def subscribe(
        self,
        callback: Callable[[list[T]], None],
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        on_error: Optional[ErrorCallback] = None,
    ) -> Unsubscribe:
        def on_snapshot(docs: list[Document]) -> None:
            callback(self._select(docs, where=where, order_by=order_by, descending=descending))

        return self._store.subscribe(self.name, on_snapshot, on_error)
