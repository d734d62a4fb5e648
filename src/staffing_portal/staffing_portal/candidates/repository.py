from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from ..documents.listeners import Unsubscribe
from .model import Candidate


class CandidateRepository(Protocol):
    def get_by_id(self, candidate_id: str) -> Optional[Candidate]:
        raise NotImplementedError

    def get_by_phone(self, phone: str) -> Optional[Candidate]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Candidate]:
        raise NotImplementedError

    def create(self, candidate: Candidate) -> Candidate:
        raise NotImplementedError

    def update(self, candidate_id: str, changes: Mapping[str, Any]) -> Candidate:
        raise NotImplementedError

    def delete_by_id(self, candidate_id: str) -> bool:
        raise NotImplementedError

    def on_change(self, callback: Callable[[list[Candidate]], None]) -> Unsubscribe:
        raise NotImplementedError
