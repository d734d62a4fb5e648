from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import StoreAttendanceStatus, WorkShiftStatus


@dataclass(frozen=True)
class MonthlyAttendance:
    """Days present of a placed candidate in one month ("YYYY-MM").

    ``base_commission`` is None for roles without a per-head payout.
    """

    id: str = ""
    candidate_id: Optional[str] = None
    candidate_name: str = ""
    vendor: Optional[str] = None
    role: Optional[str] = None
    base_commission: Optional[float] = None
    days_present: int = 0
    month: str = ""
    last_saved: Optional[str] = None


@dataclass(frozen=True)
class MonthlyAttendanceRow:
    record: MonthlyAttendance
    days_in_month: int
    payable: Optional[int]


@dataclass(frozen=True)
class StoreAttendance:
    id: str = ""
    employee_id: str = ""
    date: str = ""
    status: StoreAttendanceStatus = StoreAttendanceStatus.ABSENT
    supervisor_email: Optional[str] = None


@dataclass(frozen=True)
class StoreEmployee:
    id: str
    name: str
    role: Optional[str]
    phone: Optional[str]
    joining_date: Optional[str]


@dataclass(frozen=True)
class WorkShift:
    """Clock in/out of a team member."""

    id: str = ""
    user_id: str = ""
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    date: Optional[str] = None
    status: WorkShiftStatus = WorkShiftStatus.ACTIVE
