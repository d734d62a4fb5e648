from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from ..core.enums import TEAM_USER_TYPES, UserType
from ..documents.collection import DocumentCollection
from ..documents.listeners import Unsubscribe
from .model import UserProfile
from .repository import UserRepository


class DocumentUserRepository(DocumentCollection[UserProfile], UserRepository):
    name = "users"
    model = UserProfile
    converters = {"user_type": UserType}

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        return self.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        return self.first(email=(email or "").strip().lower())

    def get_by_phone(self, phone: str) -> Optional[UserProfile]:
        return self.first(phone=(phone or "").strip())

    def create(self, profile: UserProfile) -> UserProfile:
        return self.add(profile)

    def update(self, user_id: str, changes: Mapping[str, Any]) -> UserProfile:
        return super().update(user_id, changes)

    def delete_by_id(self, user_id: str) -> bool:
        return self.delete(user_id)

    def list_team_members(self) -> Sequence[UserProfile]:
        users = self.query(order_by="full_name")
        return [u for u in users if u.user_type in TEAM_USER_TYPES]

    def on_team_members_change(self, callback: Callable[[list[UserProfile]], None]) -> Unsubscribe:
        def on_users(users: list[UserProfile]) -> None:
            callback([u for u in users if u.user_type in TEAM_USER_TYPES])

        return self.subscribe(on_users, order_by="full_name")
