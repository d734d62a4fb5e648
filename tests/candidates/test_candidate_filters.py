from datetime import date

from src.staffing_portal.staffing_portal.candidates.filters import (
    CandidateFilter,
    Viewer,
    application_counts,
    apply_filters,
    visible_to,
)
from src.staffing_portal.staffing_portal.candidates.model import Candidate
from src.staffing_portal.staffing_portal.core.enums import UserType

TODAY = date(2025, 5, 17)

CANDIDATES = [
    Candidate(id="1", name="Ravi Kumar", email="ravi@x.com", role="Cashier", recruiter="Tia",
              applied_date="2025-05-17T09:00:00", partner_email="p@x.com"),
    Candidate(id="2", name="Asha", email="ASHA@x.com", role="Sales", recruiter="Sam",
              applied_date="2025-05-10T09:00:00", supervisor_email="s@x.com", status="Quit",
              quit_date="2025-05-12T00:00:00"),
    Candidate(id="3", name="Ravi Kumar", email="ravi@x.com", role="Sales", recruiter="Lead",
              applied_date="2025-04-01T09:00:00"),
]


def ids(items):
    return [c.id for c in items]


def test_search_matches_name_or_email_case_insensitive():
    assert ids(apply_filters(CANDIDATES, CandidateFilter(search="asha@"), today=TODAY)) == ["2"]
    assert ids(apply_filters(CANDIDATES, CandidateFilter(search="KUMAR"), today=TODAY)) == ["1", "3"]


def test_exact_filters_combine():
    flt = CandidateFilter(role="Sales", recruiter="Sam")
    assert ids(apply_filters(CANDIDATES, flt, today=TODAY)) == ["2"]


def test_date_prefix_filters():
    assert ids(apply_filters(CANDIDATES, CandidateFilter(applied_date="2025-05"), today=TODAY)) == ["1", "2"]
    assert ids(apply_filters(CANDIDATES, CandidateFilter(quit_date="2025-05-12"), today=TODAY)) == ["2"]


def test_daily_lineup_forces_today():
    flt = CandidateFilter(applied_date="2025-04", daily_lineup=True)
    assert ids(apply_filters(CANDIDATES, flt, today=TODAY)) == ["1"]


def test_from_args_reads_query_values():
    flt = CandidateFilter.from_args({"search": "  ravi ", "daily_lineup": "true", "role": "Sales"})
    assert flt.search == "ravi"
    assert flt.daily_lineup is True
    assert flt.role == "Sales"


def test_visibility_by_role():
    assert ids(visible_to(CANDIDATES, Viewer(UserType.HR))) == ["1", "2", "3"]
    assert ids(visible_to(CANDIDATES, Viewer(UserType.TEAM, full_name="Tia"))) == ["1"]
    lead = Viewer(UserType.TEAMLEAD, full_name="Lead", recruiter_names=frozenset({"Lead", "Sam"}))
    assert ids(visible_to(CANDIDATES, lead)) == ["2", "3"]
    assert ids(visible_to(CANDIDATES, Viewer(UserType.PARTNER, email="p@x.com"))) == ["1"]
    assert ids(visible_to(CANDIDATES, Viewer(UserType.STORE_SUPERVISOR, email="s@x.com"))) == ["2"]
    assert visible_to(CANDIDATES, Viewer(UserType.CANDIDATE, email="ravi@x.com")) == []
    assert visible_to(CANDIDATES, None) == []


def test_application_counts_by_email():
    counts = application_counts(CANDIDATES)
    assert counts["ravi@x.com"] == 2
    assert counts["ASHA@x.com"] == 1
