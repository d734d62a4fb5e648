from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DemoRequest:
    id: str = ""
    company_name: str = ""
    email: str = ""
    address: Optional[str] = None
    team_head: Optional[str] = None
    team_size: Optional[str] = None
    request_date: Optional[str] = None
    status: str = "Pending"
