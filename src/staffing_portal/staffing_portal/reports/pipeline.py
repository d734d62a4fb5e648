from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..candidates.model import Candidate
from ..common.datetime_utils import end_of_day, parse_iso_datetime, start_of_day
from ..core.enums import KANBAN_STAGES, CandidateStage
from ..users.model import UserProfile

SELECTION_PIPELINE_KEYS = ("Sourced", "On the way", "Interview", "Selected", "Joined", "Rejected", "Quit")


@dataclass(frozen=True)
class RecruiterPerformance:
    recruiter: str
    submissions: int = 0
    interested: int = 0
    interview: int = 0
    selected: int = 0
    joined: int = 0


@dataclass(frozen=True)
class InterviewDay:
    day: str
    candidates: list[Candidate]


@dataclass(frozen=True)
class InterviewSummary:
    upcoming: list[InterviewDay]
    past: list[InterviewDay]


def _applied_within(c: Candidate, start: Optional[date], end: Optional[date]) -> bool:
    applied = parse_iso_datetime(c.applied_date)
    if applied is None:
        return False
    if start and applied < start_of_day(start):
        return False
    if end and applied > end_of_day(end):
        return False
    return True


def selection_pipeline(
    candidates: Iterable[Candidate], *, start: Optional[date] = None, end: Optional[date] = None
) -> dict[str, int]:
    """Counts by stage, falling back to status, for candidates applied in [start, end]."""
    stats = {key: 0 for key in SELECTION_PIPELINE_KEYS}
    for c in candidates:
        if not _applied_within(c, start, end):
            continue
        if c.stage in stats:
            stats[c.stage] += 1
        elif c.status in stats:
            stats[c.status] += 1
    return stats


def recruiter_performance(
    members: Iterable[UserProfile],
    candidates: Iterable[Candidate],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[RecruiterPerformance]:
    names = [m.full_name for m in members if m.full_name]
    stats: dict[str, dict[str, int]] = {
        n: {"submissions": 0, "interested": 0, "interview": 0, "selected": 0, "joined": 0} for n in names
    }
    for c in candidates:
        if not c.recruiter or c.recruiter not in stats or not _applied_within(c, start, end):
            continue
        row = stats[c.recruiter]
        row["submissions"] += 1
        if c.call_status == "Interested":
            row["interested"] += 1
        if c.stage == CandidateStage.INTERVIEW.value:
            row["interview"] += 1
        if c.stage == CandidateStage.SELECTED.value:
            row["selected"] += 1
        if c.status == "Joined":
            row["joined"] += 1
    return [RecruiterPerformance(recruiter=name, **counts) for name, counts in stats.items()]


def kanban_board(candidates: Iterable[Candidate], *, today: date) -> dict[str, list[Candidate]]:
    """Candidates per selection stage; the Sourced column only shows today's."""
    board: dict[str, list[Candidate]] = {s.value: [] for s in KANBAN_STAGES}
    today_s = today.isoformat()
    for c in candidates:
        stage = c.stage or CandidateStage.SOURCED.value
        if stage not in board:
            continue
        if stage == CandidateStage.SOURCED.value and not (c.applied_date or "").startswith(today_s):
            continue
        board[stage].append(c)
    return board


def recruiter_stage_counts(candidates: Iterable[Candidate]) -> list[dict[str, object]]:
    stages = [s.value for s in KANBAN_STAGES]
    stats: dict[str, dict[str, int]] = {}
    for c in candidates:
        stage = c.stage or CandidateStage.SOURCED.value
        if stage not in stages:
            continue
        row = stats.setdefault(c.recruiter or "Unknown", {s: 0 for s in stages})
        row[stage] += 1
    return [{"recruiter": name, **counts, "total": sum(counts.values())} for name, counts in stats.items()]


def interview_summary(candidates: Iterable[Candidate], *, today: date) -> InterviewSummary:
    """Interview-stage candidates grouped by day: upcoming ascending, past descending.

    Records with a missing or unparseable interview date are skipped.
    """
    upcoming: dict[str, list[Candidate]] = defaultdict(list)
    past: dict[str, list[Candidate]] = defaultdict(list)
    for c in candidates:
        if c.stage != CandidateStage.INTERVIEW.value or not c.interview_date:
            continue
        when = parse_iso_datetime(c.interview_date)
        if when is None:
            continue
        day = when.date()
        (upcoming if day >= today else past)[day.isoformat()].append(c)

    return InterviewSummary(
        upcoming=[InterviewDay(d, upcoming[d]) for d in sorted(upcoming)],
        past=[InterviewDay(d, past[d]) for d in sorted(past, reverse=True)],
    )
