from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_local
from ..common.validators import optional_str, require_min_length, require_non_empty
from ..core.enums import TEAM_USER_TYPES, UserType
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..documents.listeners import Unsubscribe
from .model import UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)

_SELF_EDITABLE_FIELDS = ("full_name", "phone", "store_location")

# salary, manager and designation only change through an admin
_EDITABLE_FIELDS = _SELF_EDITABLE_FIELDS + ("role", "reporting_manager", "salary", "partner_id")


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    email: str
    full_name: str
    user_type: UserType


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user or not user.password_hash:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionUser(
            user_id=user.id,
            email=user.email or "",
            full_name=user.display_name,
            user_type=user.user_type,
        )


class UserService:
    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: str) -> UserProfile:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User does not exist")
        return user

    def find_by_email(self, email: str) -> Optional[UserProfile]:
        return self._users.get_by_email(email)

    def find_by_phone(self, phone: str) -> Optional[UserProfile]:
        return self._users.get_by_phone(phone)

    def create_profile(
        self,
        *,
        email: str,
        password: str,
        user_type: UserType,
        full_name: str = "",
        phone: str = "",
        role: str = "",
        reporting_manager: str = "",
        salary: Any = None,
        store_location: str = "",
        partner_id: str = "",
    ) -> UserProfile:
        email = require_non_empty(email, "Email").lower()
        require_min_length(password, "Password", 6)

        if self._users.get_by_email(email):
            raise ValidationError("A user with this email already exists")

        profile = UserProfile(
            email=email,
            user_type=user_type,
            full_name=optional_str(full_name),
            phone=optional_str(phone),
            role=optional_str(role),
            reporting_manager=optional_str(reporting_manager),
            salary=salary if salary not in ("", None) else None,
            store_location=optional_str(store_location),
            partner_id=optional_str(partner_id),
            password_hash=generate_password_hash(password),
            profile_complete=user_type != UserType.CANDIDATE,
            created_at=now_local().isoformat(),
        )
        created = self._users.create(profile)
        logger.info("Created %s profile %s", user_type.value, created.id)
        return created

    def create_team_member(self, *, current_type: UserType, **fields: Any) -> UserProfile:
        if current_type != UserType.ADMIN:
            raise AuthorizationError("Only an admin can add team members")
        user_type = fields.pop("user_type", UserType.TEAM)
        try:
            user_type = UserType(user_type)
        except ValueError:
            raise ValidationError("Invalid user type")
        if user_type not in TEAM_USER_TYPES:
            raise ValidationError("Team members must be ADMIN, HR, TEAMLEAD or TEAM")
        require_non_empty(fields.get("full_name"), "Full name")
        return self.create_profile(user_type=user_type, **fields)

    def ensure_candidate_profile(
        self, *, email: str, full_name: str, phone: str, default_password: str
    ) -> tuple[UserProfile, bool]:
        """Return (profile, existed). Missing candidates get a CANDIDATE profile."""
        existing = self._users.get_by_email(email)
        if existing:
            return existing, True
        created = self.create_profile(
            email=email,
            password=default_password,
            user_type=UserType.CANDIDATE,
            full_name=full_name,
            phone=phone,
        )
        return created, False

    def update_profile(self, user_id: str, changes: Mapping[str, Any]) -> UserProfile:
        self.get(user_id)
        clean = {k: v for k, v in changes.items() if k in _EDITABLE_FIELDS}
        if "password" in changes and changes["password"]:
            require_min_length(changes["password"], "Password", 6)
            clean["password_hash"] = generate_password_hash(changes["password"])
        if not clean:
            raise ValidationError("Nothing to update")
        if "full_name" in clean:
            clean["full_name"] = require_non_empty(clean["full_name"], "Full name")
        clean["profile_complete"] = True
        return self._users.update(user_id, clean)

    def update_own_profile(self, user_id: str, changes: Mapping[str, Any]) -> UserProfile:
        restricted = sorted(k for k in changes if k in _EDITABLE_FIELDS and k not in _SELF_EDITABLE_FIELDS)
        if restricted:
            raise AuthorizationError(f"Only an admin can change: {', '.join(restricted)}")
        return self.update_profile(user_id, changes)

    def delete_team_member(self, *, current_type: UserType, user_id: str) -> None:
        if current_type != UserType.ADMIN:
            raise AuthorizationError("Only an admin can remove team members")
        user = self.get(user_id)
        if user.user_type == UserType.ADMIN:
            raise ValidationError("An admin profile cannot be deleted")
        self._users.delete_by_id(user_id)
        logger.info("Deleted team member %s", user_id)

    def list_team_members(self) -> list[UserProfile]:
        return list(self._users.list_team_members())

    def listen_team_members(self, callback: Callable[[list[UserProfile]], None]) -> Unsubscribe:
        return self._users.on_team_members_change(callback)
