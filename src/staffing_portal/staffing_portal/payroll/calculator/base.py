from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for monthly payouts)."""

    @abstractmethod
    def payable(self, base_amount: Optional[float], days_present: int, days_in_month: int) -> Optional[int]:
        raise NotImplementedError
