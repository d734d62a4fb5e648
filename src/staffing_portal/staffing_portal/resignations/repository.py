from __future__ import annotations

from typing import Callable

from ..core.enums import ResignationStatus
from ..documents.collection import DocumentCollection
from ..documents.listeners import Unsubscribe
from .model import Resignation


class ResignationRepository(DocumentCollection[Resignation]):
    name = "resignations"
    model = Resignation
    converters = {"status": ResignationStatus}

    def list_for_employee(self, employee_id: str) -> list[Resignation]:
        return self.query(where={"employee_id": employee_id}, order_by="submitted_date", descending=True)

    def list_latest(self) -> list[Resignation]:
        return self.query(order_by="submitted_date", descending=True)

    def on_employee_change(self, employee_id: str, callback: Callable[[list[Resignation]], None]) -> Unsubscribe:
        return self.subscribe(callback, where={"employee_id": employee_id})
