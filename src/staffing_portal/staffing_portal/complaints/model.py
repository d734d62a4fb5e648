from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import TicketStatus, UserType

TICKET_CATEGORIES = (
    "Payroll",
    "Attendance",
    "Documents",
    "General Inquiry",
    "Invoice Query",
    "Technical Issue",
    "Other",
)


@dataclass(frozen=True)
class Ticket:
    """Help-center ticket raised by a candidate or partner."""

    id: str = ""
    submitted_by: str = ""
    submitted_by_id: Optional[str] = None
    user_type: UserType = UserType.CANDIDATE
    subject: str = ""
    category: str = "Other"
    description: str = ""
    status: TicketStatus = TicketStatus.OPEN
    submitted_date: Optional[str] = None
    resolved_date: Optional[str] = None
    hr_remarks: Optional[str] = None


@dataclass(frozen=True)
class TicketSummary:
    total: int
    active: int
    resolved: int
