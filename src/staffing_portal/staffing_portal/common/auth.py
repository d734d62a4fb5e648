from __future__ import annotations

from functools import wraps

from flask import session

from ..core.enums import UserType
from .responses import fail


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def roles_required(*user_types: UserType):
    allowed = {t.value for t in user_types}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return fail("Please sign in to continue", 401)
            if session.get("user_type") not in allowed:
                return fail("You do not have access to this page", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_user_type() -> UserType:
    return UserType(session["user_type"])


def current_user_id() -> str:
    return str(session["user_id"])
