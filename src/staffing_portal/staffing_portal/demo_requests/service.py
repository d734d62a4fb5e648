from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import now_local
from ..common.validators import optional_str, require_non_empty
from ..core.exceptions import ValidationError
from .model import DemoRequest
from .repository import DemoRequestRepository

_UPDATABLE = ("company_name", "email", "address", "team_head", "team_size", "status")


class DemoRequestService:
    def __init__(self, requests: DemoRequestRepository):
        self._requests = requests

    def create(self, payload: Mapping[str, Any]) -> DemoRequest:
        return self._requests.add(
            DemoRequest(
                company_name=require_non_empty(payload.get("company_name"), "Company name"),
                email=require_non_empty(payload.get("email"), "Email"),
                address=optional_str(payload.get("address")),
                team_head=optional_str(payload.get("team_head")),
                team_size=optional_str(payload.get("team_size")),
                request_date=now_local().isoformat(),
                status="Pending",
            )
        )

    def update(self, request_id: str, payload: Mapping[str, Any]) -> DemoRequest:
        self._requests.require(request_id)
        changes = {k: payload[k] for k in _UPDATABLE if k in payload}
        if not changes:
            raise ValidationError("Nothing to update")
        return self._requests.update(request_id, changes)

    def list_requests(self) -> list[DemoRequest]:
        return self._requests.list_latest()
