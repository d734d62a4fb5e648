from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..candidates.model import Candidate
from ..common.datetime_utils import parse_iso_datetime, start_of_day, start_of_week
from ..complaints.model import Ticket
from ..core.constants import TOP_ROLE_METRICS
from ..requirements.model import PartnerRequirement
from ..settings.model import Vendor
from .requirements import OpeningRecord, RequirementBreakdown, requirement_breakdown
from .team import TeamMemberPerformance


@dataclass(frozen=True)
class PipelineStats:
    active: int = 0
    interview: int = 0
    rejected: int = 0
    quit: int = 0


@dataclass(frozen=True)
class Metric:
    name: str
    count: int


@dataclass(frozen=True)
class NewJoining:
    day: int = 0
    week: int = 0
    month: int = 0


@dataclass(frozen=True)
class HrStats:
    total_selected: int
    total_offer_released: int
    total_onboarding_pending: int
    new_joining: NewJoining


@dataclass(frozen=True)
class ComplaintStats:
    active: int = 0
    closed: int = 0


@dataclass(frozen=True)
class RequirementStats:
    total: int = 0
    pending: int = 0
    approved: int = 0


@dataclass(frozen=True)
class AdminDashboard:
    pipeline: PipelineStats
    process: list[Metric]
    roles: list[Metric]
    hr_stats: HrStats
    complaints: ComplaintStats
    requirements: RequirementStats
    vendor_total: int
    team: list[TeamMemberPerformance]
    requirement_breakdown: RequirementBreakdown


@dataclass(frozen=True)
class PartnerDashboard:
    total_openings: int
    candidates_submitted: int
    interviews_scheduled: int
    offers_released: int
    candidates_joined: int
    fill_rate: float
    pending_requirements: int


def _closed_out(c: Candidate) -> bool:
    return (c.status or "Active") in ("Rejected", "Quit")


def pipeline_stats(candidates: Iterable[Candidate]) -> PipelineStats:
    active = interview = rejected = quit_ = 0
    for c in candidates:
        status = c.status or "Active"
        stage = c.stage or "Sourced"
        if status == "Rejected":
            rejected += 1
        elif status == "Quit":
            quit_ += 1
        elif stage == "Interview":
            interview += 1
        elif stage not in ("Selected", "Joined"):
            active += 1
    return PipelineStats(active=active, interview=interview, rejected=rejected, quit=quit_)


def process_metrics(candidates: Iterable[Candidate]) -> list[Metric]:
    counts = {"Screening": 0, "Interview": 0, "Selected": 0, "Joined": 0}
    for c in candidates:
        if _closed_out(c):
            continue
        status = c.status or "Active"
        stage = c.stage or "Sourced"
        if status == "Joined" or stage == "Joined":
            counts["Joined"] += 1
        elif stage == "Selected":
            counts["Selected"] += 1
        elif stage == "Interview":
            counts["Interview"] += 1
        else:
            counts["Screening"] += 1
    return [Metric(name, count) for name, count in counts.items()]


def top_roles(candidates: Iterable[Candidate], limit: int = TOP_ROLE_METRICS) -> list[Metric]:
    roles = Counter(c.role or "Unknown" for c in candidates if not _closed_out(c))
    # Counter.most_common keeps first-seen order for ties.
    return [Metric(name, count) for name, count in roles.most_common(limit)]


def hr_stats(candidates: Iterable[Candidate], *, now: datetime) -> HrStats:
    today = start_of_day(now.date())
    week = start_of_day(start_of_week(now.date()))
    month = start_of_day(now.date().replace(day=1))

    selected = offers = onboarding = 0
    day_n = week_n = month_n = 0
    for c in candidates:
        status = c.status or "Active"
        stage = c.stage or "Sourced"
        if stage == "Selected" or status in ("Selected", "Joined"):
            selected += 1
        if "Offer" in status or stage == "Offer Sent":
            offers += 1
        if status == "Onboarding" or (stage == "Selected" and status != "Joined"):
            onboarding += 1
        if status == "Joined" or stage == "Joined":
            joined_at = parse_iso_datetime(c.joining_date or c.applied_date)
            if joined_at is None:
                continue
            day_n += joined_at >= today
            week_n += joined_at >= week
            month_n += joined_at >= month
    return HrStats(
        total_selected=selected,
        total_offer_released=offers,
        total_onboarding_pending=onboarding,
        new_joining=NewJoining(day=day_n, week=week_n, month=month_n),
    )


def complaint_stats(tickets: Iterable[Ticket]) -> ComplaintStats:
    active = closed = 0
    for t in tickets:
        status = getattr(t.status, "value", t.status)
        if status in ("Open", "In Progress", "Active"):
            active += 1
        elif status in ("Resolved", "Closed"):
            closed += 1
    return ComplaintStats(active=active, closed=closed)


def requirement_stats(records: Iterable[OpeningRecord]) -> RequirementStats:
    total = pending = approved = 0
    for r in records:
        total += 1
        if r.submission_status == "Pending Review":
            pending += 1
        elif r.submission_status == "Approved":
            approved += 1
    return RequirementStats(total=total, pending=pending, approved=approved)


def partner_dashboard(
    partner_email: str,
    vendors: Sequence[Vendor],
    requirements: Iterable[PartnerRequirement],
    candidates: Iterable[Candidate],
) -> Optional[PartnerDashboard]:
    """Stats over the brands of the vendor registered with the partner's email."""
    vendor = next((v for v in vendors if v.email == partner_email), None)
    if vendor is None:
        return None
    brands = set(vendor.brand_names)
    mine = [r for r in requirements if r.brand in brands]
    my_candidates = [c for c in candidates if c.vendor and c.vendor in brands]

    approved = [r for r in mine if r.submission_status.value == "Approved"]
    total_openings = sum(int(r.openings or 0) for r in approved)
    joined = sum(1 for c in my_candidates if c.status == "Joined")
    return PartnerDashboard(
        total_openings=total_openings,
        candidates_submitted=len(my_candidates),
        interviews_scheduled=sum(1 for c in my_candidates if c.stage == "Interview"),
        offers_released=sum(1 for c in my_candidates if c.status and ("Offer" in c.status or c.stage == "Offer Sent")),
        candidates_joined=joined,
        fill_rate=(joined / total_openings) * 100 if total_openings > 0 else 0.0,
        pending_requirements=sum(1 for r in mine if r.submission_status.value == "Pending Review"),
    )


def admin_dashboard(
    *,
    candidates: Sequence[Candidate],
    tickets: Iterable[Ticket],
    openings: Sequence[OpeningRecord],
    vendors: Sequence[Vendor],
    team: list[TeamMemberPerformance],
    team_names: Sequence[str],
    now: datetime,
) -> AdminDashboard:
    return AdminDashboard(
        pipeline=pipeline_stats(candidates),
        process=process_metrics(candidates),
        roles=top_roles(candidates),
        hr_stats=hr_stats(candidates, now=now),
        complaints=complaint_stats(tickets),
        requirements=requirement_stats(openings),
        vendor_total=len(vendors),
        team=team,
        requirement_breakdown=requirement_breakdown(openings, team_names),
    )
