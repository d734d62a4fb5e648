from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from ..documents.collection import DocumentCollection
from ..documents.listeners import Unsubscribe
from .model import Candidate, normalise_call_status
from .repository import CandidateRepository


class DocumentCandidateRepository(DocumentCollection[Candidate], CandidateRepository):
    name = "candidates"
    model = Candidate
    converters = {"call_status": normalise_call_status}

    def get_by_id(self, candidate_id: str) -> Optional[Candidate]:
        return self.get(candidate_id)

    def get_by_phone(self, phone: str) -> Optional[Candidate]:
        return self.first(phone=phone)

    def list_all(self) -> Sequence[Candidate]:
        return self.query(order_by="applied_date", descending=True)

    def create(self, candidate: Candidate) -> Candidate:
        return self.add(candidate)

    def update(self, candidate_id: str, changes: Mapping[str, Any]) -> Candidate:
        return super().update(candidate_id, changes)

    def delete_by_id(self, candidate_id: str) -> bool:
        return self.delete(candidate_id)

    def on_change(self, callback: Callable[[list[Candidate]], None]) -> Unsubscribe:
        return self.subscribe(callback, order_by="applied_date", descending=True)
