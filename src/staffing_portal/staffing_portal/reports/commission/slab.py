from __future__ import annotations

from typing import Optional

from ...candidates.model import Candidate
from ...common.validators import leading_int
from ...settings.model import CommissionSlab, Vendor
from .base import CommissionStrategy


def find_slab(slabs: tuple[CommissionSlab, ...], hires: int) -> Optional[CommissionSlab]:
    """First slab whose range holds ``hires``; a non-numeric upper bound is open-ended."""
    for slab in slabs:
        low = leading_int(slab.from_value)
        if low is None:
            continue
        high = leading_int(slab.to_value)
        if high is None:
            if hires >= low:
                return slab
        elif low <= hires <= high:
            return slab
    return None


class SlabCommission(CommissionStrategy):
    def commission(self, vendor: Vendor, candidate: Candidate, *, vendor_hires: int) -> float:
        slab = find_slab(vendor.commission_slabs, vendor_hires)
        if slab is None:
            return 0.0
        return float(leading_int(slab.amount) or 0)
