from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..common.validators import optional_str, require_non_empty
from ..core.constants import DIRECT_VENDOR, LINEUP_EMAIL_DOMAIN
from ..core.enums import CallStatus, CandidateStage, CandidateStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..documents.listeners import Unsubscribe
from ..users.service import UserService
from .model import Candidate
from .repository import CandidateRepository

logger = logging.getLogger(__name__)

_LINEUP_FIELDS = (
    "name",
    "email",
    "phone",
    "role",
    "vendor",
    "partner_name",
    "store_location",
    "location",
    "call_status",
    "interview_date",
    "interview_details",
    "partner_email",
    "supervisor_email",
    "gross_salary",
    "experience_level",
    "remarks",
    "job_id",
)

_UPDATABLE_FIELDS = _LINEUP_FIELDS + (
    "status",
    "stage",
    "recruiter",
    "applied_date",
    "quit_date",
    "joining_date",
)


@dataclass(frozen=True)
class LineupResult:
    candidate: Candidate
    # True when an existing candidate/profile was reused.
    updated: bool


@dataclass(frozen=True)
class TransferRequest:
    vendor: str
    role: str
    location: str
    store_location: str
    call_status: str = CallStatus.APPLIED.value
    partner_name: Optional[str] = None
    interview_date: Optional[str] = None
    interview_details: Optional[str] = None


def _pick(payload: Mapping[str, Any], allowed: tuple[str, ...]) -> dict[str, Any]:
    return {k: payload[k] for k in allowed if k in payload}


def _require_interview_date(value: Any) -> str:
    parsed = parse_iso_datetime(value)
    if parsed is None:
        raise ValidationError("Please provide an interview date and time")
    return parsed.isoformat()


class CandidateService:
    def __init__(self, candidates: CandidateRepository, users: UserService, *, default_password: str):
        self._candidates = candidates
        self._users = users
        self._default_password = default_password

    def list_candidates(self) -> list[Candidate]:
        return list(self._candidates.list_all())

    def get(self, candidate_id: str) -> Candidate:
        candidate = self._candidates.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundError("Candidate does not exist")
        return candidate

    def listen(self, callback: Callable[[list[Candidate]], None]) -> Unsubscribe:
        return self._candidates.on_change(callback)

    def create_lineup(self, payload: Mapping[str, Any], *, recruiter: str) -> LineupResult:
        """Add a sourced candidate, reusing the profile/record of a known candidate."""
        data = _pick(payload, _LINEUP_FIELDS)
        data["name"] = require_non_empty(data.get("name"), "Name")
        data["phone"] = require_non_empty(data.get("phone"), "Mobile number")
        if not optional_str(data.get("email")):
            digits = re.sub(r"\D", "", data["phone"])
            data["email"] = f"{digits}@{LINEUP_EMAIL_DOMAIN}"
        data["email"] = str(data["email"]).strip().lower()
        if data.get("vendor") == DIRECT_VENDOR:
            data["partner_name"] = None

        now = now_local().isoformat()
        data.update(
            status=CandidateStatus.ACTIVE.value,
            stage=CandidateStage.SOURCED.value,
            call_status=data.get("call_status") or CallStatus.APPLIED.value,
            recruiter=recruiter or "Unknown",
            applied_date=now,
        )
        if data["call_status"] == CallStatus.INTERESTED.value:
            data["interview_date"] = _require_interview_date(data.get("interview_date"))
            data["stage"] = CandidateStage.INTERVIEW.value

        profile, existed = self._users.ensure_candidate_profile(
            email=data["email"],
            full_name=data["name"],
            phone=data["phone"],
            default_password=self._default_password,
        )
        data["user_id"] = profile.id

        if existed:
            current = self._candidates.get_by_phone(data["phone"])
            if current:
                logger.info("Reusing candidate %s for a new lineup", current.id)
                return LineupResult(self._candidates.update(current.id, data), updated=True)

        candidate = self._candidates.create(Candidate(**data, created_at=now))
        logger.info("Lineup %s added by %s", candidate.id, data["recruiter"])
        return LineupResult(candidate, updated=existed)

    def submit_application(self, payload: Mapping[str, Any], *, user_id: Optional[str] = None) -> Candidate:
        data = _pick(payload, _LINEUP_FIELDS)
        data["name"] = require_non_empty(data.get("name"), "Name")
        require_non_empty(data.get("email") or data.get("phone"), "Email or phone")
        call_status = data.pop("call_status", None) or CallStatus.APPLIED.value
        now = now_local().isoformat()
        candidate = Candidate(
            **data,
            status=CandidateStatus.PENDING.value,
            stage=CandidateStage.APPLIED.value,
            call_status=call_status,
            user_id=user_id,
            applied_date=now,
            created_at=now,
        )
        return self._candidates.create(candidate)

    def update(self, candidate_id: str, changes: Mapping[str, Any]) -> Candidate:
        self.get(candidate_id)
        data = _pick(changes, _UPDATABLE_FIELDS)
        if not data:
            raise ValidationError("Nothing to update")
        if "name" in data:
            data["name"] = require_non_empty(data["name"], "Name")
        return self._candidates.update(candidate_id, data)

    def delete(self, candidate_id: str) -> None:
        if not self._candidates.delete_by_id(candidate_id):
            raise NotFoundError("Candidate does not exist")
        logger.info("Deleted candidate %s", candidate_id)

    def move_stage(self, candidate_id: str, stage: str) -> Candidate:
        try:
            target = CandidateStage(stage)
        except ValueError:
            raise ValidationError(f"Unknown stage: {stage}")
        self.get(candidate_id)
        return self._candidates.update(candidate_id, {"stage": target.value})

    def mark_quit(self, candidate_id: str, quit_date: Optional[str] = None) -> Candidate:
        self.get(candidate_id)
        when = parse_iso_datetime(quit_date) if quit_date else now_local()
        if when is None:
            raise ValidationError("Invalid quit date")
        return self._candidates.update(
            candidate_id, {"status": CandidateStatus.QUIT.value, "quit_date": when.isoformat()}
        )

    def transfer(self, candidate_id: str, req: TransferRequest) -> Candidate:
        """Re-assign to a new vendor/role/store; optionally straight to interview."""
        self.get(candidate_id)
        for value, label in (
            (req.vendor, "Vendor"),
            (req.role, "Role"),
            (req.location, "Location"),
            (req.store_location, "Store"),
        ):
            require_non_empty(value, label)

        changes: dict[str, Any] = {
            "vendor": req.vendor,
            "partner_name": None if req.vendor == DIRECT_VENDOR else optional_str(req.partner_name),
            "role": req.role,
            "location": req.location,
            "store_location": req.store_location,
            "call_status": req.call_status,
            "applied_date": now_local().isoformat(),
        }
        if req.call_status == CallStatus.INTERESTED.value:
            changes["stage"] = CandidateStage.INTERVIEW.value
            changes["interview_date"] = _require_interview_date(req.interview_date)
            changes["interview_details"] = optional_str(req.interview_details)
        else:
            changes["stage"] = CandidateStage.SOURCED.value
            changes["interview_date"] = None
            changes["interview_details"] = None

        logger.info("Transferring candidate %s to %s/%s", candidate_id, req.vendor, req.role)
        return self._candidates.update(candidate_id, changes)
