from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from ..core.enums import RequirementStatus
from ..documents.collection import DocumentCollection
from ..documents.listeners import ErrorCallback, Unsubscribe
from .model import PartnerRequirement
from .repository import RequirementRepository


class DocumentRequirementRepository(DocumentCollection[PartnerRequirement], RequirementRepository):
    name = "partnerRequirements"
    model = PartnerRequirement
    converters = {"submission_status": RequirementStatus}

    def get_by_id(self, requirement_id: str) -> Optional[PartnerRequirement]:
        return self.get(requirement_id)

    def list_requirements(self, *, partner_id: Optional[str] = None) -> Sequence[PartnerRequirement]:
        where = {"partner_id": partner_id} if partner_id else None
        return self.query(where=where, order_by="posted_date", descending=True)

    def create(self, requirement: PartnerRequirement) -> PartnerRequirement:
        return self.add(requirement)

    def update(self, requirement_id: str, changes: Mapping[str, Any]) -> PartnerRequirement:
        return super().update(requirement_id, changes)

    def delete_by_id(self, requirement_id: str) -> bool:
        return self.delete(requirement_id)

    def on_change(
        self, callback: Callable[[list[PartnerRequirement]], None], on_error: Optional[ErrorCallback] = None
    ) -> Unsubscribe:
        return self.subscribe(callback, order_by="posted_date", descending=True, on_error=on_error)
