from __future__ import annotations

from typing import Callable, Optional

from ..documents.collection import DocumentCollection
from ..documents.listeners import Unsubscribe
from .model import StoreSupervisor


class SupervisorRepository(DocumentCollection[StoreSupervisor]):
    name = "storeSupervisors"
    model = StoreSupervisor

    def list_supervisors(self, partner_id: Optional[str] = None) -> list[StoreSupervisor]:
        where = {"partner_id": partner_id} if partner_id else None
        return self.query(where=where, order_by="name")

    def on_change(
        self, callback: Callable[[list[StoreSupervisor]], None], partner_id: Optional[str] = None
    ) -> Unsubscribe:
        where = {"partner_id": partner_id} if partner_id else None
        return self.subscribe(callback, where=where, order_by="name")
