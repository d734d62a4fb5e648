"""Server-Sent Events fed by the document store's live listeners."""

from __future__ import annotations

import json
import queue

from flask import Flask, Response, stream_with_context

from ..candidates.controller import session_viewer
from ..candidates.filters import Viewer, visible_to
from ..candidates.model import Candidate
from ..common.auth import current_user_id, current_user_type, login_required
from ..common.responses import fail, to_jsonable
from ..core.enums import UserType
from ..container import Container
from ..documents.collection import model_from_document
from ..documents.store import Document

_STAFF = frozenset({UserType.ADMIN, UserType.HR, UserType.TEAMLEAD, UserType.TEAM})

# collection -> user types allowed to follow it
STREAMABLE = {
    "jobs": frozenset(UserType),
    "settings": frozenset(UserType),
    "candidates": _STAFF,
    "complaints": frozenset({UserType.ADMIN, UserType.HR}),
    "partnerRequirements": _STAFF | {UserType.PARTNER},
    "attendance": _STAFF,
    "storeAttendance": _STAFF | {UserType.STORE_SUPERVISOR},
    "storeSupervisors": _STAFF | {UserType.PARTNER},
    "resignations": frozenset({UserType.ADMIN, UserType.HR}),
    "demoRequests": frozenset({UserType.ADMIN}),
    "employees": frozenset({UserType.ADMIN, UserType.HR}),
}

KEEPALIVE_SECONDS = 15


def format_event(docs) -> str:
    payload = [{"id": d.id, **to_jsonable(d.data)} for d in docs]
    return f"data: {json.dumps(payload)}\n\n"


def scope_snapshot(collection: str, docs: list[Document], viewer: Viewer, user_id: str) -> list[Document]:
    """Trim a snapshot to what the same user gets from the list endpoints."""
    if collection == "candidates":
        visible = {c.id for c in visible_to([model_from_document(Candidate, d) for d in docs], viewer)}
        return [d for d in docs if d.id in visible]
    if viewer.user_type == UserType.PARTNER and collection in ("partnerRequirements", "storeSupervisors"):
        return [d for d in docs if d.data.get("partner_id") == user_id]
    if viewer.user_type == UserType.STORE_SUPERVISOR and collection == "storeAttendance":
        return [d for d in docs if d.data.get("supervisor_email") == viewer.email]
    return list(docs)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stream/<collection>", endpoint="stream_collection")
    @login_required
    def stream_collection(collection: str):
        allowed = STREAMABLE.get(collection)
        if allowed is None:
            return fail(f"Unknown collection: {collection}", 404)
        if current_user_type() not in allowed:
            return fail("You do not have access to this page", 403)

        viewer = session_viewer(container)
        user_id = current_user_id()

        def events():
            snapshots: queue.Queue = queue.Queue()
            unsubscribe = container.store.subscribe(
                collection,
                snapshots.put,
                on_error=lambda exc: app.logger.warning("Stream %s listener failed: %s", collection, exc),
            )
            try:
                while True:
                    try:
                        docs = snapshots.get(timeout=KEEPALIVE_SECONDS)
                    except queue.Empty:
                        yield ": keep-alive\n\n"
                        continue
                    yield format_event(scope_snapshot(collection, docs, viewer, user_id))
            finally:
                unsubscribe()

        return Response(
            stream_with_context(events()),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )
