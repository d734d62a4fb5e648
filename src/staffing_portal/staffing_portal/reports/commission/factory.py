from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import CommissionType
from ...settings.model import Vendor
from .attendance import AttendanceCommission
from .base import CommissionStrategy, NoCommission
from .percentage import PercentageCommission
from .slab import SlabCommission


@dataclass
class CommissionStrategyFactory:
    """Factory Pattern: choose strategy by the vendor's commission type."""

    def for_vendor(self, vendor: Vendor) -> CommissionStrategy:
        if vendor.commission_type == CommissionType.PERCENTAGE:
            return PercentageCommission()
        if vendor.commission_type == CommissionType.SLAB:
            return SlabCommission()
        if vendor.commission_type == CommissionType.ATTENDANCE:
            return AttendanceCommission()
        return NoCommission()
