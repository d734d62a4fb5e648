from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import RequirementStatus


@dataclass(frozen=True)
class PartnerRequirement:
    id: str = ""
    title: str = ""
    client: str = ""
    brand: Optional[str] = None
    location: str = ""
    store_name: Optional[str] = None
    openings: int = 1
    salary: str = ""
    experience: str = ""
    posted_date: Optional[str] = None
    description: str = ""
    job_type: str = ""
    working_days: str = ""
    job_shift: str = ""
    partner_id: Optional[str] = None
    submission_status: RequirementStatus = RequirementStatus.PENDING_REVIEW
    decided_by: Optional[str] = None
    decided_at: Optional[str] = None
    admin_note: Optional[str] = None
