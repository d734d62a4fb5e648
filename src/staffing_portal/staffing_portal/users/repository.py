from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from ..documents.listeners import Unsubscribe
from .model import UserProfile


class UserRepository(Protocol):
    """Repository interface for user profiles.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def get_by_phone(self, phone: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def create(self, profile: UserProfile) -> UserProfile:
        raise NotImplementedError

    def update(self, user_id: str, changes: Mapping[str, Any]) -> UserProfile:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> bool:
        raise NotImplementedError

    def list_team_members(self) -> Sequence[UserProfile]:
        raise NotImplementedError

    def on_team_members_change(self, callback: Callable[[list[UserProfile]], None]) -> Unsubscribe:
        raise NotImplementedError
