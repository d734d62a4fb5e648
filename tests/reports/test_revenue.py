import pytest

from src.staffing_portal.staffing_portal.candidates.model import Candidate
from src.staffing_portal.staffing_portal.core.enums import CommissionType, UserType
from src.staffing_portal.staffing_portal.reports.commission.attendance import AttendanceCommission
from src.staffing_portal.staffing_portal.reports.commission.base import NoCommission
from src.staffing_portal.staffing_portal.reports.commission.factory import CommissionStrategyFactory
from src.staffing_portal.staffing_portal.reports.commission.percentage import PercentageCommission
from src.staffing_portal.staffing_portal.reports.commission.slab import SlabCommission, find_slab
from src.staffing_portal.staffing_portal.reports.revenue import RevenueCalculator
from src.staffing_portal.staffing_portal.reports.team import team_performance
from src.staffing_portal.staffing_portal.settings.model import AttendanceRule, CommissionSlab, Vendor
from src.staffing_portal.staffing_portal.users.model import UserProfile

ACME = Vendor(id="a", brand_names=("Acme",), partner_name="Acme Partners", commission_value="10")
GLOBEX = Vendor(
    id="g",
    brand_names=("Globex",),
    commission_type=CommissionType.SLAB,
    commission_slabs=(
        CommissionSlab(from_value="1", to_value="2", amount="1000"),
        CommissionSlab(from_value="3", to_value="", amount="1500"),
    ),
)
INITECH = Vendor(
    id="i",
    brand_names=("Initech",),
    commission_type=CommissionType.ATTENDANCE,
    commission_attendance_rules=(
        AttendanceRule(role="Cashier", experience_type="Fresher", amount="700"),
        AttendanceRule(role="Cashier", experience_type="Any", amount="500"),
    ),
)


def test_factory_picks_strategy_by_commission_type():
    factory = CommissionStrategyFactory()
    assert isinstance(factory.for_vendor(ACME), PercentageCommission)
    assert isinstance(factory.for_vendor(GLOBEX), SlabCommission)
    assert isinstance(factory.for_vendor(INITECH), AttendanceCommission)


def test_percentage_commission_uses_gross_salary():
    amount = PercentageCommission().commission(ACME, Candidate(gross_salary="20000"), vendor_hires=1)
    assert amount == pytest.approx(2000)


def test_slab_lookup_supports_open_ended_upper_bound():
    assert find_slab(GLOBEX.commission_slabs, 2).amount == "1000"
    assert find_slab(GLOBEX.commission_slabs, 40).amount == "1500"
    assert find_slab(GLOBEX.commission_slabs, 0) is None
    assert find_slab((CommissionSlab(from_value="x", to_value="9", amount="1"),), 3) is None


def test_attendance_commission_matches_role_and_experience():
    strategy = AttendanceCommission()
    fresher = Candidate(role="Cashier", experience_level="Fresher")
    experienced = Candidate(role="Cashier", experience_level="3 years")
    other_role = Candidate(role="Sales", experience_level="Fresher")

    assert strategy.commission(INITECH, fresher, vendor_hires=1) == 700
    assert strategy.commission(INITECH, experienced, vendor_hires=1) == 500
    assert strategy.commission(INITECH, other_role, vendor_hires=1) == 0


def test_revenue_summary_balances_team_and_vendor_figures():
    members = [
        UserProfile(id="t", full_name="Tia", user_type=UserType.TEAM, salary="25000"),
        UserProfile(id="s", full_name="Sam", user_type=UserType.TEAM),
        UserProfile(id="h", full_name="Hina", user_type=UserType.HR),
    ]
    candidates = [
        Candidate(recruiter="Tia", vendor="Direct", stage="Selected"),
        Candidate(recruiter="Tia", vendor="Acme", stage="Selected", gross_salary="20000"),
        Candidate(recruiter="Tia", vendor="Acme", gross_salary="50000"),
        Candidate(recruiter="Sam", vendor="Globex", status="Joined"),
    ]
    calc = RevenueCalculator(direct_client_revenue=10000, default_team_salary=30000)
    summary = calc.summary(team_performance(members, candidates), members, candidates, [ACME, GLOBEX])

    team = {r.member: r for r in summary.team}
    assert set(team) == {"Tia", "Sam"}
    assert team["Tia"].revenue_generated == pytest.approx(12000)
    assert team["Tia"].salary_cost == 25000
    assert team["Sam"].revenue_generated == pytest.approx(1000)
    assert team["Sam"].salary_cost == 30000

    vendors = {r.entity: r for r in summary.vendors}
    assert vendors["Direct"].type == "Client"
    assert vendors["Direct"].revenue_in == 10000
    assert vendors["Acme"].cost_out == pytest.approx(2000)
    assert vendors["Globex"].cost_out == pytest.approx(1000)

    assert summary.total_revenue == pytest.approx(23000)
    assert summary.total_cost == pytest.approx(58000)
    assert summary.net_profit == pytest.approx(-35000)


def test_profit_margin_is_zero_without_revenue():
    summary = RevenueCalculator().summary([], [], [], [])
    assert summary.profit_margin == 0.0


def test_slab_bounds_read_leading_digits():
    slabs = (
        CommissionSlab(from_value="1", to_value="10+", amount="800 per hire"),
        CommissionSlab(from_value="11", to_value="and above", amount="1200"),
    )
    assert find_slab(slabs, 10).amount == "800 per hire"
    assert find_slab(slabs, 11).amount == "1200"

    decimal_low = (CommissionSlab(from_value="2.5", to_value="4", amount="900"),)
    assert find_slab(decimal_low, 2).amount == "900"

    vendor = Vendor(id="s", commission_type=CommissionType.SLAB, commission_slabs=slabs)
    assert SlabCommission().commission(vendor, Candidate(), vendor_hires=3) == 800


def test_unknown_commission_type_pays_nothing():
    vendor = Vendor.from_dict({"id": "x", "partner_name": "Old", "commission_type": "Per Hour", "commission_value": "10"})
    assert vendor.commission_type == "Per Hour"
    assert vendor.to_dict()["commission_type"] == "Per Hour"

    strategy = CommissionStrategyFactory().for_vendor(vendor)
    assert isinstance(strategy, NoCommission)
    assert strategy.commission(vendor, Candidate(gross_salary="20000"), vendor_hires=1) == 0.0
