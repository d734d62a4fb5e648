from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ResignationStatus


@dataclass(frozen=True)
class Resignation:
    id: str = ""
    employee_id: str = ""
    employee_name: Optional[str] = None
    reason: str = ""
    submitted_date: Optional[str] = None
    status: ResignationStatus = ResignationStatus.PENDING
    notice_period_start_date: Optional[str] = None
    last_working_day: Optional[str] = None
    hr_remarks: Optional[str] = None
