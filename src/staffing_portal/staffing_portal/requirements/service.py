from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_str, require_non_empty, require_positive_int
from ..core.enums import RequirementStatus, UserType
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..documents.listeners import Unsubscribe
from ..jobs.model import Job
from .model import PartnerRequirement
from .repository import RequirementRepository

logger = logging.getLogger(__name__)

_TEXT_FIELDS = (
    "client",
    "brand",
    "location",
    "store_name",
    "salary",
    "experience",
    "description",
    "job_type",
    "working_days",
    "job_shift",
)


class RequirementService:
    """Partner requirements and their admin approval workflow."""

    def __init__(self, requirements: RequirementRepository):
        self._requirements = requirements

    def _get(self, requirement_id: str) -> PartnerRequirement:
        req = self._requirements.get_by_id(requirement_id)
        if not req:
            raise NotFoundError("Requirement does not exist")
        return req

    def create(self, *, current_type: UserType, partner_id: str, payload: Mapping[str, Any]) -> PartnerRequirement:
        if current_type not in (UserType.PARTNER, UserType.ADMIN):
            raise AuthorizationError("Only partners can submit requirements")
        data = {k: str(payload[k]).strip() for k in _TEXT_FIELDS if payload.get(k) is not None}
        req = PartnerRequirement(
            **data,
            title=require_non_empty(payload.get("title"), "Title"),
            openings=require_positive_int(payload.get("openings", 1), "Openings"),
            partner_id=partner_id,
            posted_date=now_local().isoformat(),
            submission_status=RequirementStatus.PENDING_REVIEW,
        )
        created = self._requirements.create(req)
        logger.info("Requirement %s submitted by partner %s", created.id, partner_id)
        return created

    def list_requirements(self, *, partner_id: Optional[str] = None, status: str = "") -> list[PartnerRequirement]:
        items = list(self._requirements.list_requirements(partner_id=partner_id))
        if status:
            items = [r for r in items if r.submission_status.value == status]
        return items

    def _decide(
        self, *, current_type: UserType, admin_user_id: str, requirement_id: str, status: RequirementStatus, admin_note: str
    ) -> PartnerRequirement:
        if current_type != UserType.ADMIN:
            raise AuthorizationError("You do not have permission to review requirements")

        req = self._get(requirement_id)
        if req.submission_status != RequirementStatus.PENDING_REVIEW:
            raise ValidationError("Requirement has already been reviewed")

        decided = self._requirements.update(
            requirement_id,
            {
                "submission_status": status,
                "decided_by": admin_user_id,
                "decided_at": now_local().isoformat(),
                "admin_note": optional_str(admin_note),
            },
        )
        logger.info("Requirement %s %s by %s", requirement_id, status.value, admin_user_id)
        return decided

    def approve(
        self, *, current_type: UserType, admin_user_id: str, requirement_id: str, admin_note: str = ""
    ) -> PartnerRequirement:
        return self._decide(
            current_type=current_type,
            admin_user_id=admin_user_id,
            requirement_id=requirement_id,
            status=RequirementStatus.APPROVED,
            admin_note=admin_note,
        )

    def reject(
        self, *, current_type: UserType, admin_user_id: str, requirement_id: str, admin_note: str = ""
    ) -> PartnerRequirement:
        return self._decide(
            current_type=current_type,
            admin_user_id=admin_user_id,
            requirement_id=requirement_id,
            status=RequirementStatus.REJECTED,
            admin_note=admin_note,
        )

    def delete(self, *, current_type: UserType, partner_id: str, requirement_id: str) -> None:
        req = self._get(requirement_id)
        if current_type != UserType.ADMIN and req.partner_id != partner_id:
            raise AuthorizationError("You can only delete your own requirements")
        self._requirements.delete_by_id(requirement_id)

    def approved_job_postings(self) -> list[Job]:
        """Approved requirements as they appear on the public job board."""
        return [
            Job(
                id=r.id,
                title=r.title,
                company=r.client,
                store_name=r.store_name,
                description=r.description,
                posted_date=r.posted_date,
                salary_range=r.salary,
                experience_level=r.experience,
                number_of_openings=r.openings,
                job_city=r.location,
                job_type=r.job_type,
                working_days=r.working_days,
                job_shift=r.job_shift,
            )
            for r in self.list_requirements(status=RequirementStatus.APPROVED.value)
        ]

    def listen(self, callback: Callable[[list[PartnerRequirement]], None]) -> Unsubscribe:
        return self._requirements.on_change(callback)
