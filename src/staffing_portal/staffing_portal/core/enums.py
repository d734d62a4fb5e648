from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Panel a user signs into; drives what each endpoint returns."""

    ADMIN = "ADMIN"
    HR = "HR"
    TEAM = "TEAM"
    TEAMLEAD = "TEAMLEAD"
    PARTNER = "PARTNER"
    STORE_SUPERVISOR = "STORE_SUPERVISOR"
    CANDIDATE = "CANDIDATE"


TEAM_USER_TYPES = frozenset({UserType.ADMIN, UserType.HR, UserType.TEAM, UserType.TEAMLEAD})


class CandidateStage(str, Enum):
    APPLIED = "Applied"
    SOURCED = "Sourced"
    ON_THE_WAY = "On the way"
    INTERVIEW = "Interview"
    SELECTED = "Selected"
    JOINED = "Joined"


KANBAN_STAGES = (
    CandidateStage.APPLIED,
    CandidateStage.SOURCED,
    CandidateStage.ON_THE_WAY,
    CandidateStage.INTERVIEW,
    CandidateStage.SELECTED,
)


class CandidateStatus(str, Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    SELECTED = "Selected"
    ONBOARDING = "Onboarding"
    JOINED = "Joined"
    REJECTED = "Rejected"
    QUIT = "Quit"


class CallStatus(str, Enum):
    APPLIED = "Applied"
    INTERESTED = "Interested"
    NOT_INTERESTED = "Not Interested"
    CALL_BACK = "Call Back"
    # Written by older clients; read back as APPLIED.
    DIRECT_APPLICATION = "Direct Application"


class TicketStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class RequirementStatus(str, Enum):
    """Approval states of a partner-submitted requirement."""

    PENDING_REVIEW = "Pending Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ResignationStatus(str, Enum):
    PENDING = "Pending HR Approval"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class StoreAttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LEAVE = "Leave"
    WEEK_OFF = "Week Off"


class WorkShiftStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class CommissionType(str, Enum):
    PERCENTAGE = "Percentage Based"
    SLAB = "Slab Based"
    ATTENDANCE = "Attendance Based"
