from __future__ import annotations

from typing import Callable

from ..documents.collection import DocumentCollection
from ..documents.listeners import Unsubscribe
from .model import DemoRequest


class DemoRequestRepository(DocumentCollection[DemoRequest]):
    name = "demoRequests"
    model = DemoRequest

    def list_latest(self) -> list[DemoRequest]:
        return self.query(order_by="request_date", descending=True)

    def on_change(self, callback: Callable[[list[DemoRequest]], None]) -> Unsubscribe:
        return self.subscribe(callback, order_by="request_date", descending=True)
