from __future__ import annotations

from ...candidates.model import Candidate
from ...common.validators import leading_int
from ...settings.model import Vendor
from .base import CommissionStrategy


class AttendanceCommission(CommissionStrategy):
    """Fixed amount per role and experience; assumes the attendance target is met."""

    def commission(self, vendor: Vendor, candidate: Candidate, *, vendor_hires: int) -> float:
        experience = "Fresher" if candidate.experience_level == "Fresher" else "Experienced"
        for rule in vendor.commission_attendance_rules:
            if rule.role == candidate.role and rule.experience_type in (experience, "Any"):
                return float(leading_int(rule.amount) or 0)
        return 0.0
