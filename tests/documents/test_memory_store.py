from dataclasses import dataclass

import pytest

from src.staffing_portal.staffing_portal.core.exceptions import NotFoundError
from src.staffing_portal.staffing_portal.documents.collection import DocumentCollection
from src.staffing_portal.staffing_portal.documents.memory_store import InMemoryDocumentStore


@dataclass(frozen=True)
class Note:
    id: str = ""
    title: str = ""
    rank: int = 0
    owner: str = ""


class NoteCollection(DocumentCollection[Note]):
    name = "notes"
    model = Note


def test_add_returns_generated_id_and_get_reads_it_back():
    store = InMemoryDocumentStore()
    doc_id = store.add("notes", {"title": "a"})

    assert doc_id
    assert store.get("notes", doc_id).data == {"title": "a"}
    assert store.get("notes", "missing") is None


def test_set_merge_keeps_existing_fields_and_plain_set_replaces():
    store = InMemoryDocumentStore()
    store.set("settings", "app", {"a": 1, "b": 2})

    store.set("settings", "app", {"b": 3}, merge=True)
    assert store.get("settings", "app").data == {"a": 1, "b": 3}

    store.set("settings", "app", {"c": 4})
    assert store.get("settings", "app").data == {"c": 4}


def test_set_merge_creates_missing_document():
    store = InMemoryDocumentStore()
    store.set("settings", "app", {"a": 1}, merge=True)
    assert store.get("settings", "app").data == {"a": 1}


def test_update_missing_document_raises():
    store = InMemoryDocumentStore()
    with pytest.raises(NotFoundError):
        store.update("notes", "nope", {"title": "x"})


def test_returned_documents_are_copies():
    store = InMemoryDocumentStore()
    doc_id = store.add("notes", {"tags": ["a"]})
    store.get("notes", doc_id).data["tags"].append("b")
    assert store.get("notes", doc_id).data == {"tags": ["a"]}


def test_subscribe_delivers_initial_snapshot_and_every_write():
    store = InMemoryDocumentStore()
    store.add("notes", {"title": "first"})
    seen = []

    unsubscribe = store.subscribe("notes", lambda docs: seen.append(sorted(d.data["title"] for d in docs)))
    doc_id = store.add("notes", {"title": "second"})
    store.update("notes", doc_id, {"title": "third"})
    store.delete("notes", doc_id)

    assert seen == [["first"], ["first", "second"], ["first", "third"], ["first"]]

    unsubscribe()
    unsubscribe()
    store.add("notes", {"title": "ignored"})
    assert len(seen) == 4


def test_failing_listener_does_not_block_others():
    store = InMemoryDocumentStore()
    errors = []
    seen = []

    def boom(_docs):
        raise RuntimeError("listener failed")

    store.subscribe("notes", boom, on_error=errors.append)
    store.subscribe("notes", lambda docs: seen.append(len(docs)))
    store.add("notes", {"title": "x"})

    assert seen == [0, 1]
    assert len(errors) == 2
    assert all(isinstance(e, RuntimeError) for e in errors)


def test_collection_query_filters_orders_and_limits():
    notes = NoteCollection(InMemoryDocumentStore())
    notes.add(Note(title="b", rank=2, owner="x"))
    notes.add(Note(title="a", rank=1, owner="x"))
    notes.add(Note(title="c", rank=3, owner="y"))

    assert [n.title for n in notes.query(order_by="title")] == ["a", "b", "c"]
    assert [n.title for n in notes.query(where={"owner": "x"}, order_by="rank", descending=True)] == ["b", "a"]
    assert [n.title for n in notes.query(order_by="rank", limit=1)] == ["a"]
    assert notes.first(owner="y").title == "c"


def test_collection_update_returns_model_and_require_raises_for_unknown():
    notes = NoteCollection(InMemoryDocumentStore())
    created = notes.add(Note(title="a"))

    updated = notes.update(created.id, {"title": "renamed"})
    assert updated == Note(id=created.id, title="renamed")

    with pytest.raises(NotFoundError):
        notes.require("unknown")


def test_collection_subscribe_maps_documents_to_models():
    notes = NoteCollection(InMemoryDocumentStore())
    seen = []
    notes.subscribe(lambda items: seen.append([n.title for n in items]), where={"owner": "x"}, order_by="title")

    notes.add(Note(title="z", owner="x"))
    notes.add(Note(title="m", owner="y"))
    notes.add(Note(title="a", owner="x"))

    assert seen[-1] == ["a", "z"]
