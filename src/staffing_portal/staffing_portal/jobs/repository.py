from __future__ import annotations

from typing import Callable

from ..documents.collection import DocumentCollection
from ..documents.listeners import Unsubscribe
from .model import Job


class JobRepository(DocumentCollection[Job]):
    name = "jobs"
    model = Job

    def list_latest(self) -> list[Job]:
        return self.query(order_by="posted_date", descending=True)

    def on_change(self, callback: Callable[[list[Job]], None]) -> Unsubscribe:
        return self.subscribe(callback, order_by="posted_date", descending=True)
