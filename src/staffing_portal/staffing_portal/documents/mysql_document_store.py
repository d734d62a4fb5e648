from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .listeners import ListenerRegistry
from .store import BaseDocumentStore, Document, new_doc_id

logger = logging.getLogger(__name__)


def _load(raw: Any) -> dict:
    if raw is None:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return json.loads(raw)
    return dict(raw)


def _dump(data: dict) -> str:
    return json.dumps(data, ensure_ascii=False)


class MySQLDocumentStore(BaseDocumentStore):
    """Documents persisted as JSON rows of the ``documents`` table.

    Listeners are process-local: they see writes made through this instance.
    """

    def __init__(self, conn_factory: DatabaseConnection, listeners: Optional[ListenerRegistry] = None):
        super().__init__(listeners)
        self._conn_factory = conn_factory

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT doc_id, data FROM documents WHERE collection=%s AND doc_id=%s",
                (collection, doc_id),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Document(id=row["doc_id"], data=_load(row["data"]))

    def list(self, collection: str) -> Sequence[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT doc_id, data FROM documents WHERE collection=%s ORDER BY created_at, doc_id",
                (collection,),
            )
            return [Document(id=r["doc_id"], data=_load(r["data"])) for r in fetchall(cur)]

    def add(self, collection: str, data: dict) -> str:
        doc_id = new_doc_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO documents(collection, doc_id, data) VALUES(%s,%s,%s)",
                (collection, doc_id, _dump(data)),
            )
        self._publish(collection)
        return doc_id

    def set(self, collection: str, doc_id: str, data: dict, *, merge: bool = False) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            payload = dict(data)
            if merge:
                cur.execute(
                    "SELECT data FROM documents WHERE collection=%s AND doc_id=%s FOR UPDATE",
                    (collection, doc_id),
                )
                row = fetchone(cur)
                if row:
                    payload = {**_load(row["data"]), **data}
            cur.execute(
                """
                INSERT INTO documents(collection, doc_id, data) VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE data=VALUES(data)
                """,
                (collection, doc_id, _dump(payload)),
            )
        self._publish(collection)

    def update(self, collection: str, doc_id: str, data: dict) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT data FROM documents WHERE collection=%s AND doc_id=%s FOR UPDATE",
                (collection, doc_id),
            )
            row = fetchone(cur)
            if not row:
                raise NotFoundError(f"{collection}/{doc_id} does not exist")
            cur.execute(
                "UPDATE documents SET data=%s WHERE collection=%s AND doc_id=%s",
                (_dump({**_load(row["data"]), **data}), collection, doc_id),
            )
        self._publish(collection)

    def delete(self, collection: str, doc_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM documents WHERE collection=%s AND doc_id=%s", (collection, doc_id))
            removed = cur.rowcount > 0
        if removed:
            self._publish(collection)
        else:
            logger.debug("Delete of missing document %s/%s", collection, doc_id)
        return removed
