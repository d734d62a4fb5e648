from datetime import date

from src.staffing_portal.staffing_portal.candidates.model import Candidate
from src.staffing_portal.staffing_portal.core.enums import UserType
from src.staffing_portal.staffing_portal.reports.pipeline import (
    interview_summary,
    kanban_board,
    recruiter_performance,
    selection_pipeline,
)
from src.staffing_portal.staffing_portal.users.model import UserProfile

TODAY = date(2025, 5, 17)


def test_selection_pipeline_counts_stage_then_status_within_inclusive_range():
    candidates = [
        Candidate(stage="Interview", applied_date="2025-05-01T10:00:00"),
        Candidate(stage="Applied", status="Rejected", applied_date="2025-05-10T23:59:00"),
        Candidate(stage="Selected", applied_date="2025-05-11T00:00:01"),
        Candidate(stage="Sourced", applied_date=None),
    ]
    stats = selection_pipeline(candidates, start=date(2025, 5, 1), end=date(2025, 5, 10))
    assert stats["Interview"] == 1
    assert stats["Rejected"] == 1
    assert stats["Selected"] == 0
    assert stats["Sourced"] == 0


def test_recruiter_performance_only_counts_team_members():
    members = [UserProfile(id="1", full_name="Tia", user_type=UserType.TEAM)]
    candidates = [
        Candidate(recruiter="Tia", call_status="Interested", stage="Interview", applied_date="2025-05-02"),
        Candidate(recruiter="Tia", stage="Selected", status="Joined", applied_date="2025-05-03"),
        Candidate(recruiter="Ghost", applied_date="2025-05-03"),
    ]
    (row,) = recruiter_performance(members, candidates)
    assert (row.submissions, row.interested, row.interview, row.selected, row.joined) == (2, 1, 1, 1, 1)


def test_kanban_sourced_column_only_shows_today():
    candidates = [
        Candidate(id="a", stage="Sourced", applied_date="2025-05-17T08:00:00"),
        Candidate(id="b", stage="Sourced", applied_date="2025-05-16T08:00:00"),
        Candidate(id="c", stage="Interview", applied_date="2025-05-01T08:00:00"),
        Candidate(id="d", stage="Unknown"),
    ]
    board = kanban_board(candidates, today=TODAY)
    assert [c.id for c in board["Sourced"]] == ["a"]
    assert [c.id for c in board["Interview"]] == ["c"]
    assert all(c.id != "d" for column in board.values() for c in column)


def test_interview_summary_orders_and_skips_invalid_dates():
    candidates = [
        Candidate(id="u2", stage="Interview", interview_date="2025-05-20T10:00:00"),
        Candidate(id="u1", stage="Interview", interview_date="2025-05-17T09:00:00"),
        Candidate(id="p1", stage="Interview", interview_date="2025-05-01T09:00:00"),
        Candidate(id="p2", stage="Interview", interview_date="2025-05-10T09:00:00"),
        Candidate(id="bad", stage="Interview", interview_date="not a date"),
        Candidate(id="other", stage="Selected", interview_date="2025-05-20T10:00:00"),
    ]
    summary = interview_summary(candidates, today=TODAY)
    assert [d.day for d in summary.upcoming] == ["2025-05-17", "2025-05-20"]
    assert [d.day for d in summary.past] == ["2025-05-10", "2025-05-01"]
