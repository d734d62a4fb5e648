from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..candidates.model import Candidate
from ..common.validators import to_float
from ..core.constants import DEFAULT_DIRECT_CLIENT_REVENUE, DEFAULT_TEAM_SALARY, DIRECT_VENDOR
from ..core.enums import UserType
from ..settings.model import Vendor
from ..users.model import UserProfile
from .commission.factory import CommissionStrategyFactory
from .team import TeamMemberPerformance


@dataclass(frozen=True)
class TeamFinancials:
    id: str
    member: str
    role: str
    revenue_generated: float
    salary_cost: float


@dataclass(frozen=True)
class VendorFinancials:
    entity: str
    # 'Vendor' or 'Client'
    type: str
    hires: int
    revenue_in: float
    cost_out: float


@dataclass(frozen=True)
class RevenueSummary:
    team: list[TeamFinancials]
    vendors: list[VendorFinancials]
    team_revenue: float
    team_cost: float
    vendor_revenue: float
    vendor_cost: float
    total_revenue: float
    total_cost: float
    net_profit: float
    profit_margin: float


def is_hired(c: Candidate) -> bool:
    return c.stage == "Selected" or c.status == "Joined"


def _find_vendor(vendors: Sequence[Vendor], name: Optional[str]) -> Optional[Vendor]:
    return next((v for v in vendors if v.matches(name)), None)


class RevenueCalculator:
    """Projected revenue and cost of the team and of each vendor/client."""

    def __init__(
        self,
        *,
        factory: Optional[CommissionStrategyFactory] = None,
        direct_client_revenue: float = DEFAULT_DIRECT_CLIENT_REVENUE,
        default_team_salary: float = DEFAULT_TEAM_SALARY,
    ):
        self._factory = factory or CommissionStrategyFactory()
        self._direct_revenue = float(direct_client_revenue)
        self._default_salary = float(default_team_salary)

    def _commission(self, vendor: Optional[Vendor], candidate: Candidate, hires_by_vendor: dict[str, int]) -> float:
        if vendor is None:
            return 0.0
        strategy = self._factory.for_vendor(vendor)
        return strategy.commission(vendor, candidate, vendor_hires=hires_by_vendor.get(candidate.vendor or "", 0))

    def team_financials(
        self,
        performance: Iterable[TeamMemberPerformance],
        members: Iterable[UserProfile],
        candidates: Sequence[Candidate],
        vendors: Sequence[Vendor],
    ) -> list[TeamFinancials]:
        """Revenue a member generated: Direct hires earn the fixed client fee, vendor
        hires what the vendor would have been paid for the same placement."""
        salaries = {m.id: m.salary for m in members}
        hired = [c for c in candidates if is_hired(c)]
        hires_by_vendor: dict[str, int] = defaultdict(int)
        for c in hired:
            if c.vendor:
                hires_by_vendor[c.vendor] += 1

        rows = []
        for row in performance:
            if row.user_type in (UserType.ADMIN, UserType.HR):
                continue
            revenue = 0.0
            for c in hired:
                if c.recruiter != row.team_member:
                    continue
                if c.vendor == DIRECT_VENDOR:
                    revenue += self._direct_revenue
                else:
                    revenue += self._commission(_find_vendor(vendors, c.vendor), c, hires_by_vendor)
            rows.append(
                TeamFinancials(
                    id=row.id,
                    member=row.team_member,
                    role=row.role,
                    revenue_generated=revenue,
                    salary_cost=to_float(salaries.get(row.id)) or self._default_salary,
                )
            )
        return rows

    def vendor_financials(self, candidates: Sequence[Candidate], vendors: Sequence[Vendor]) -> list[VendorFinancials]:
        by_vendor: dict[str, list[Candidate]] = defaultdict(list)
        for c in candidates:
            if c.vendor:
                by_vendor[c.vendor].append(c)

        rows = []
        for name, items in by_vendor.items():
            hired = [c for c in items if is_hired(c)]
            if name == DIRECT_VENDOR:
                rows.append(VendorFinancials(name, "Client", len(hired), len(hired) * self._direct_revenue, 0.0))
                continue
            vendor = _find_vendor(vendors, name)
            counts = {name: len(hired)}
            cost = sum(self._commission(vendor, c, counts) for c in hired)
            rows.append(VendorFinancials(name, "Vendor", len(hired), 0.0, cost))
        return rows

    def summary(
        self,
        performance: Iterable[TeamMemberPerformance],
        members: Iterable[UserProfile],
        candidates: Sequence[Candidate],
        vendors: Sequence[Vendor],
    ) -> RevenueSummary:
        team = self.team_financials(performance, members, candidates, vendors)
        vendor_rows = self.vendor_financials(candidates, vendors)

        team_revenue = sum(r.revenue_generated for r in team)
        team_cost = sum(r.salary_cost for r in team)
        vendor_revenue = sum(r.revenue_in for r in vendor_rows)
        vendor_cost = sum(r.cost_out for r in vendor_rows)
        total_revenue = team_revenue + vendor_revenue
        total_cost = team_cost + vendor_cost
        net = total_revenue - total_cost

        return RevenueSummary(
            team=team,
            vendors=vendor_rows,
            team_revenue=team_revenue,
            team_cost=team_cost,
            vendor_revenue=vendor_revenue,
            vendor_cost=vendor_cost,
            total_revenue=total_revenue,
            total_cost=total_cost,
            net_profit=net,
            profit_margin=(net / total_revenue) * 100 if total_revenue > 0 else 0.0,
        )
