from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import UserType


@dataclass(frozen=True)
class UserProfile:
    """Domain entity: a signed-up user (team member, partner, supervisor or candidate).

    Note: ``reporting_manager`` holds the manager's full name, which is how the
    team tree is linked.
    """

    id: str = ""
    email: Optional[str] = None
    user_type: UserType = UserType.CANDIDATE
    full_name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    reporting_manager: Optional[str] = None
    salary: Optional[Any] = None
    store_location: Optional[str] = None
    partner_id: Optional[str] = None
    password_hash: Optional[str] = None
    profile_complete: bool = True
    created_at: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email or "Unknown User"

    def public(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "user_type": self.user_type.value,
            "full_name": self.full_name,
            "phone": self.phone,
            "role": self.role,
            "reporting_manager": self.reporting_manager,
            "salary": self.salary,
            "store_location": self.store_location,
            "partner_id": self.partner_id,
            "profile_complete": self.profile_complete,
            "created_at": self.created_at,
        }
