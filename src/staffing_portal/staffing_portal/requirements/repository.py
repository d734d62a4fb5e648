from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from ..documents.listeners import ErrorCallback, Unsubscribe
from .model import PartnerRequirement


class RequirementRepository(Protocol):
    def get_by_id(self, requirement_id: str) -> Optional[PartnerRequirement]:
        raise NotImplementedError

    def list_requirements(self, *, partner_id: Optional[str] = None) -> Sequence[PartnerRequirement]:
        raise NotImplementedError

    def create(self, requirement: PartnerRequirement) -> PartnerRequirement:
        raise NotImplementedError

    def update(self, requirement_id: str, changes: Mapping[str, Any]) -> PartnerRequirement:
        raise NotImplementedError

    def delete_by_id(self, requirement_id: str) -> bool:
        raise NotImplementedError

    def on_change(
        self, callback: Callable[[list[PartnerRequirement]], None], on_error: Optional[ErrorCallback] = None
    ) -> Unsubscribe:
        raise NotImplementedError
