from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Employee:
    """A candidate promoted to the payroll; ids run EMP001, EMP002, ..."""

    id: str = ""
    candidate_id: Optional[str] = None
    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    vendor: Optional[str] = None
    # 'Active', 'Inactive' or 'Onboarding'
    status: str = "Onboarding"
    date_of_joining: Optional[str] = None
    address: Optional[str] = None
    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    ifsc_code: Optional[str] = None
    pan_number: Optional[str] = None
    aadhaar_number: Optional[str] = None
    gross_salary: Optional[Any] = None
    onboarding_status: str = "Pending Submission"
