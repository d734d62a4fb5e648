from __future__ import annotations

from typing import Callable

from ..core.enums import TicketStatus, UserType
from ..documents.collection import DocumentCollection
from ..documents.listeners import Unsubscribe
from .model import Ticket


class TicketRepository(DocumentCollection[Ticket]):
    name = "complaints"
    model = Ticket
    converters = {"status": TicketStatus, "user_type": UserType}

    def list_latest(self) -> list[Ticket]:
        return self.query(order_by="submitted_date", descending=True)

    def list_for_user(self, user_id: str) -> list[Ticket]:
        return self.query(where={"submitted_by_id": user_id}, order_by="submitted_date", descending=True)

    def on_change(self, callback: Callable[[list[Ticket]], None]) -> Unsubscribe:
        return self.subscribe(callback, order_by="submitted_date", descending=True)
