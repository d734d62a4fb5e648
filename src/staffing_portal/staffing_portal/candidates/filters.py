from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional

from ..core.enums import UserType
from .model import Candidate


@dataclass(frozen=True)
class CandidateFilter:
    """Table filters; empty strings mean "any".

    Date filters are prefixes of the stored ISO value ('2024-05' or '2024-05-17').
    """

    search: str = ""
    role: str = ""
    vendor: str = ""
    store_location: str = ""
    status: str = ""
    call_status: str = ""
    recruiter: str = ""
    applied_date: str = ""
    quit_date: str = ""
    daily_lineup: bool = False

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "CandidateFilter":
        return cls(
            search=(args.get("search") or "").strip(),
            role=args.get("role") or "",
            vendor=args.get("vendor") or "",
            store_location=args.get("store_location") or "",
            status=args.get("status") or "",
            call_status=args.get("call_status") or "",
            recruiter=args.get("recruiter") or "",
            applied_date=args.get("applied_date") or "",
            quit_date=args.get("quit_date") or "",
            daily_lineup=(args.get("daily_lineup") or "").lower() in ("1", "true", "yes"),
        )


@dataclass(frozen=True)
class Viewer:
    user_type: UserType
    full_name: str = ""
    email: str = ""
    # Team leads: their own name plus their downline's.
    recruiter_names: frozenset[str] = field(default_factory=frozenset)


def _matches(c: Candidate, flt: CandidateFilter, today: date) -> bool:
    applied = c.applied_date or ""
    if flt.daily_lineup:
        if not applied.startswith(today.isoformat()):
            return False
    elif flt.applied_date and not applied.startswith(flt.applied_date):
        return False

    if flt.quit_date and not (c.quit_date or "").startswith(flt.quit_date):
        return False

    if flt.search:
        needle = flt.search.lower()
        if needle not in (c.name or "").lower() and needle not in (c.email or "").lower():
            return False

    exact = (
        (flt.role, c.role),
        (flt.vendor, c.vendor),
        (flt.store_location, c.store_location),
        (flt.status, c.status),
        (flt.call_status, c.call_status),
        (flt.recruiter, c.recruiter),
    )
    return all(not wanted or actual == wanted for wanted, actual in exact)


def apply_filters(candidates: Iterable[Candidate], flt: CandidateFilter, *, today: date) -> list[Candidate]:
    return [c for c in candidates if _matches(c, flt, today)]


def visible_to(candidates: Iterable[Candidate], viewer: Optional[Viewer]) -> list[Candidate]:
    if viewer is None:
        return []
    if viewer.user_type in (UserType.ADMIN, UserType.HR):
        return list(candidates)
    if viewer.user_type == UserType.TEAMLEAD:
        return [c for c in candidates if c.recruiter and c.recruiter in viewer.recruiter_names]
    if viewer.user_type == UserType.TEAM:
        return [c for c in candidates if c.recruiter == viewer.full_name]
    if viewer.user_type == UserType.PARTNER:
        return [c for c in candidates if c.partner_email == viewer.email]
    if viewer.user_type == UserType.STORE_SUPERVISOR:
        return [c for c in candidates if c.supervisor_email == viewer.email]
    return []


def application_counts(candidates: Iterable[Candidate]) -> dict[str, int]:
    """How many records share each email (repeat applicants)."""
    return dict(Counter(c.email for c in candidates if c.email))


def filter_options(candidates: Iterable[Candidate]) -> dict[str, list[str]]:
    items = list(candidates)

    def distinct(attr: str) -> list[str]:
        return sorted({getattr(c, attr) for c in items if getattr(c, attr)})

    return {
        "roles": distinct("role"),
        "vendors": distinct("vendor"),
        "stores": distinct("store_location"),
        "statuses": distinct("status"),
        "call_statuses": distinct("call_status"),
        "recruiters": distinct("recruiter"),
    }
