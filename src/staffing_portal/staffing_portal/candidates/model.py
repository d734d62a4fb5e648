from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import CallStatus


def normalise_call_status(value: Any) -> Any:
    """Older records carry 'Direct Application'; it reads back as 'Applied'."""
    if value == CallStatus.DIRECT_APPLICATION.value:
        return CallStatus.APPLIED.value
    return value


@dataclass(frozen=True)
class Candidate:
    """One pipeline record.

    ``stage`` and ``status`` stay plain strings: historic records hold values
    outside the current enums and must still round-trip.
    """

    id: str = ""
    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    vendor: Optional[str] = None
    partner_name: Optional[str] = None
    store_location: Optional[str] = None
    location: Optional[str] = None
    status: str = "Active"
    stage: str = "Sourced"
    call_status: Optional[str] = None
    recruiter: Optional[str] = None
    applied_date: Optional[str] = None
    quit_date: Optional[str] = None
    joining_date: Optional[str] = None
    interview_date: Optional[str] = None
    interview_details: Optional[str] = None
    gross_salary: Optional[Any] = None
    experience_level: Optional[str] = None
    partner_email: Optional[str] = None
    supervisor_email: Optional[str] = None
    user_id: Optional[str] = None
    job_id: Optional[str] = None
    remarks: Optional[str] = None
    created_at: Optional[str] = None
