from __future__ import annotations

from ...candidates.model import Candidate
from ...common.validators import to_float
from ...settings.model import Vendor
from .base import CommissionStrategy


class PercentageCommission(CommissionStrategy):
    """commission_value % of the candidate's gross salary."""

    def commission(self, vendor: Vendor, candidate: Candidate, *, vendor_hires: int) -> float:
        return to_float(candidate.gross_salary) * to_float(vendor.commission_value) / 100
