from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .base import PayCalculator


def round_half_up(value: float) -> int:
    # x.5 goes up, unlike round() which picks the even neighbour
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ProratedPayCalculator(PayCalculator):
    """Base prorated by days present, halves rounded up; None when there is no base amount."""

    def payable(self, base_amount: Optional[float], days_present: int, days_in_month: int) -> Optional[int]:
        if base_amount is None:
            return None
        if days_in_month <= 0:
            return 0
        return round_half_up(float(base_amount) / days_in_month * int(days_present))
