from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Mapping, Sequence

from ..jobs.model import Job
from ..requirements.model import PartnerRequirement
from ..settings.model import Vendor


@dataclass(frozen=True)
class OpeningRecord:
    """A partner requirement or a posted job, flattened for the breakdown tables."""

    id: str
    title: str
    client: str
    brand: str
    partner_name: str
    store_name: str
    location: str
    openings: int
    submission_status: str
    team_member: str = ""


@dataclass
class BreakdownRow:
    name: str
    location: str
    total_openings: int = 0
    pending: int = 0
    approved: int = 0
    breakdowns: dict[str, dict[str, int]] = field(default_factory=dict)


@dataclass(frozen=True)
class RequirementBreakdown:
    team: list[BreakdownRow]
    partner: list[BreakdownRow]
    store: list[BreakdownRow]
    role: list[BreakdownRow]


def _openings(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def brand_partner_map(vendors: Iterable[Vendor]) -> dict[str, str]:
    out: dict[str, str] = {}
    for v in vendors:
        for brand in v.brand_names:
            out[brand] = v.partner_name or "N/A"
    return out


def merge_openings(
    requirements: Iterable[PartnerRequirement], jobs: Iterable[Job], vendors: Iterable[Vendor]
) -> list[OpeningRecord]:
    """Partner requirements plus posted jobs; jobs count as approved openings."""
    partners = brand_partner_map(vendors)
    records = [
        OpeningRecord(
            id=r.id,
            title=r.title,
            client=r.client,
            brand=r.client or "Unknown",
            partner_name=partners.get(r.client, "N/A"),
            store_name=r.location,
            location=r.location,
            openings=_openings(r.openings),
            submission_status=r.submission_status.value,
        )
        for r in requirements
    ]
    records += [
        OpeningRecord(
            id=j.id,
            title=j.title,
            client=j.company,
            brand=j.company,
            partner_name=partners.get(j.company, "N/A"),
            store_name=j.store_name or j.locality or "Unknown Store",
            location=j.job_city or "Unknown City",
            openings=_openings(j.number_of_openings),
            submission_status="Approved",
        )
        for j in jobs
    ]
    return records


def assign_round_robin(records: Sequence[OpeningRecord], team_members: Sequence[str]) -> list[OpeningRecord]:
    names = [n for n in team_members if n]
    out = []
    for i, rec in enumerate(records):
        owner = names[i % len(names)] if names else "Unassigned Team"
        out.append(replace(rec, team_member=owner))
    return out


def create_breakdown(
    records: Iterable[OpeningRecord],
    key: Callable[[OpeningRecord], str],
    selectors: Mapping[str, Callable[[OpeningRecord], str]],
) -> list[BreakdownRow]:
    """Group openings by ``key``; each row also splits its openings by every selector."""
    rows: dict[str, BreakdownRow] = {}
    for rec in records:
        name = key(rec)
        row = rows.get(name)
        if row is None:
            row = rows[name] = BreakdownRow(
                name=name, location=rec.location or "N/A", breakdowns={k: {} for k in selectors}
            )
        row.total_openings += rec.openings
        if rec.submission_status == "Pending Review":
            row.pending += rec.openings
        elif rec.submission_status == "Approved":
            row.approved += rec.openings
        for bkey, select in selectors.items():
            value = select(rec)
            row.breakdowns[bkey][value] = row.breakdowns[bkey].get(value, 0) + rec.openings
    return list(rows.values())


def requirement_breakdown(records: Sequence[OpeningRecord], team_members: Sequence[str]) -> RequirementBreakdown:
    with_team = assign_round_robin(records, team_members)
    return RequirementBreakdown(
        team=create_breakdown(
            with_team,
            lambda r: r.team_member,
            {
                "location": lambda r: r.location,
                "role": lambda r: r.title,
                "store": lambda r: r.store_name,
                "brand": lambda r: r.brand,
                "partner_name": lambda r: r.partner_name,
            },
        ),
        partner=create_breakdown(
            records,
            lambda r: r.client or "Unassigned",
            {
                "location": lambda r: r.location,
                "role": lambda r: r.title,
                "store": lambda r: r.store_name,
                "partner_name": lambda r: r.partner_name,
            },
        ),
        store=create_breakdown(
            records,
            lambda r: r.store_name or "N/A",
            {
                "role": lambda r: r.title,
                "partner": lambda r: r.client,
                "brand": lambda r: r.brand,
                "partner_name": lambda r: r.partner_name,
            },
        ),
        role=create_breakdown(
            records,
            lambda r: r.title or "N/A",
            {
                "location": lambda r: r.location,
                "store": lambda r: r.store_name,
                "partner": lambda r: r.client,
                "brand": lambda r: r.brand,
                "partner_name": lambda r: r.partner_name,
            },
        ),
    )
