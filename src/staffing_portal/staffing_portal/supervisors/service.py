from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ..common.validators import optional_str, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..documents.listeners import Unsubscribe
from .model import StoreSupervisor
from .repository import SupervisorRepository

_FIELDS = ("name", "email", "phone", "store_location", "status")


class SupervisorService:
    def __init__(self, supervisors: SupervisorRepository):
        self._supervisors = supervisors

    def list_supervisors(self, partner_id: Optional[str] = None) -> list[StoreSupervisor]:
        return self._supervisors.list_supervisors(partner_id)

    def create(self, payload: Mapping[str, Any], *, partner_id: Optional[str]) -> StoreSupervisor:
        supervisor = StoreSupervisor(
            name=require_non_empty(payload.get("name"), "Name"),
            email=require_non_empty(payload.get("email"), "Email").lower(),
            phone=optional_str(payload.get("phone")),
            store_location=optional_str(payload.get("store_location")),
            partner_id=partner_id,
            status=payload.get("status") or "Active",
        )
        return self._supervisors.add(supervisor)

    def update(self, supervisor_id: str, payload: Mapping[str, Any]) -> StoreSupervisor:
        self._supervisors.require(supervisor_id)
        changes = {k: payload[k] for k in _FIELDS if k in payload}
        if not changes:
            raise ValidationError("Nothing to update")
        if "status" in changes and changes["status"] not in ("Active", "Inactive"):
            raise ValidationError("Status must be Active or Inactive")
        return self._supervisors.update(supervisor_id, changes)

    def delete(self, supervisor_id: str) -> None:
        if not self._supervisors.delete(supervisor_id):
            raise NotFoundError("Supervisor does not exist")

    def listen(
        self, callback: Callable[[list[StoreSupervisor]], None], partner_id: Optional[str] = None
    ) -> Unsubscribe:
        return self._supervisors.on_change(callback, partner_id)
