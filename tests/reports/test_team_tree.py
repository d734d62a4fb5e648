from src.staffing_portal.staffing_portal.candidates.model import Candidate
from src.staffing_portal.staffing_portal.core.enums import UserType
from src.staffing_portal.staffing_portal.reports.team import (
    build_team_tree,
    count_pipeline,
    downline,
    downline_names,
    team_performance,
)
from src.staffing_portal.staffing_portal.users.model import UserProfile


def member(id_, name, manager=None, user_type=UserType.TEAM, **kw):
    return UserProfile(id=id_, full_name=name, reporting_manager=manager, user_type=user_type, **kw)


MEMBERS = [
    member("admin", "Admin", user_type=UserType.ADMIN),
    member("hr", "Hina", user_type=UserType.HR),
    member("l1", "lara", "Admin", UserType.TEAMLEAD),
    member("l2", "Bob", None, UserType.TEAMLEAD),
    member("t1", "Zoe", "lara"),
    member("t2", "Adam", "lara"),
    member("t3", "Cy", "Bob"),
    member("t4", "Ned", "Ghost"),
]


def test_tree_excludes_admin_and_hr_and_sorts_case_insensitively():
    tree = build_team_tree(MEMBERS)
    assert [(n.member.id, n.level) for n in tree] == [
        ("l2", 0),
        ("t3", 1),
        ("l1", 0),
        ("t2", 1),
        ("t1", 1),
        ("t4", 0),
    ]


def test_reporting_cycle_members_become_roots():
    members = [member("a", "Ann", "Ben"), member("b", "Ben", "Ann"), member("c", "Cat")]
    tree = build_team_tree(members)
    assert sorted(n.member.id for n in tree) == ["a", "b", "c"]
    assert [(n.member.id, n.level) for n in tree] == [("c", 0), ("a", 0), ("b", 1)]


def test_count_pipeline_classifies_candidates():
    counts = count_pipeline(
        [
            Candidate(stage="Selected"),
            Candidate(stage="Interview", status="Joined"),
            Candidate(status="Rejected"),
            Candidate(status="Quit"),
            Candidate(),
        ]
    )
    assert (counts.total, counts.selected, counts.rejected, counts.quit, counts.pending) == (5, 2, 1, 1, 1)
    assert counts.success_rate == 40.0


def test_performance_aggregates_downline_counts():
    candidates = [
        Candidate(recruiter="lara", stage="Selected"),
        Candidate(recruiter="Zoe"),
        Candidate(recruiter="Zoe", status="Rejected"),
        Candidate(recruiter="Adam", status="Quit"),
        Candidate(recruiter="Cy"),
    ]
    rows = {r.id: r for r in team_performance(MEMBERS, candidates)}

    assert rows["l1"].total == 4
    assert rows["l1"].selected == 1
    assert rows["l1"].rejected == 1
    assert rows["l1"].quit == 1
    assert rows["l1"].pending == 1
    assert rows["l1"].success_rate == 25.0
    assert rows["l1"].role == "Team Lead"
    assert rows["l1"].is_downline is False
    assert rows["t1"].total == 2
    assert rows["t1"].role == "Team Member"
    assert rows["t1"].is_downline is True
    assert rows["l2"].total == 1


def test_display_name_falls_back_to_email_then_unknown():
    rows = team_performance(
        [member("x", None, email="x@x.com"), UserProfile(id="y", user_type=UserType.TEAM)], []
    )
    assert sorted(r.team_member for r in rows) == ["Unknown User", "x@x.com"]


def test_downline_is_contiguous_deeper_rows():
    rows = team_performance(MEMBERS, [])
    assert [r.id for r in downline(rows, "l1")] == ["l1", "t2", "t1"]
    assert [r.id for r in downline(rows, "t3")] == ["t3"]
    assert downline(rows, "nobody") == []


def test_downline_names_include_lead():
    assert downline_names(MEMBERS, "l1") == frozenset({"lara", "Adam", "Zoe"})
    assert downline_names(MEMBERS, "missing") == frozenset()
