from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StoreSupervisor:
    id: str = ""
    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    store_location: Optional[str] = None
    partner_id: Optional[str] = None
    # 'Active' or 'Inactive'
    status: str = "Active"
