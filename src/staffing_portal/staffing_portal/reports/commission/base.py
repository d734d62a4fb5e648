from __future__ import annotations

from abc import ABC, abstractmethod

from ...candidates.model import Candidate
from ...settings.model import Vendor


class CommissionStrategy(ABC):
    """Commission a vendor earns for one hire (Strategy Pattern)."""

    @abstractmethod
    def commission(self, vendor: Vendor, candidate: Candidate, *, vendor_hires: int) -> float:
        """``vendor_hires`` is the vendor's total hire count, used by slab rules."""
        raise NotImplementedError


class NoCommission(CommissionStrategy):
    """Vendors with a commission type we do not know earn nothing."""

    def commission(self, vendor: Vendor, candidate: Candidate, *, vendor_hires: int) -> float:
        return 0.0
