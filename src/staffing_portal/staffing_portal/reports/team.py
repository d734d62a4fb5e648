"""Manager -> report-chain tree and per-member pipeline performance.

Members are linked by name: ``reporting_manager`` holds the manager's full name.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..candidates.model import Candidate
from ..core.constants import ROOT_MANAGER_NAME
from ..core.enums import UserType
from ..users.model import UserProfile

logger = logging.getLogger(__name__)

_EXCLUDED_TYPES = frozenset({UserType.ADMIN, UserType.HR})


@dataclass(frozen=True)
class TreeNode:
    member: UserProfile
    level: int


@dataclass(frozen=True)
class PipelineCounts:
    total: int = 0
    selected: int = 0
    pending: int = 0
    rejected: int = 0
    quit: int = 0

    @property
    def success_rate(self) -> float:
        return (self.selected / self.total) * 100 if self.total > 0 else 0.0

    def __add__(self, other: "PipelineCounts") -> "PipelineCounts":
        return PipelineCounts(
            total=self.total + other.total,
            selected=self.selected + other.selected,
            pending=self.pending + other.pending,
            rejected=self.rejected + other.rejected,
            quit=self.quit + other.quit,
        )


@dataclass(frozen=True)
class TeamMemberPerformance:
    id: str
    team_member: str
    full_name: Optional[str]
    email: Optional[str]
    user_type: UserType
    role: str
    reporting_manager: Optional[str]
    level: int
    is_downline: bool
    total: int
    selected: int
    pending: int
    rejected: int
    quit: int
    success_rate: float


def _name_key(member: UserProfile) -> str:
    return (member.full_name or "").casefold()


def build_team_tree(members: Iterable[UserProfile]) -> list[TreeNode]:
    """Pre-order flattening of the report chain, roots and siblings sorted by name.

    ADMIN and HR are left out. A member is a root when it has no manager, reports
    to "Admin", or names a manager that is not in the list. Members only reachable
    through a reporting cycle are promoted to roots.
    """
    relevant = [m for m in members if m.user_type not in _EXCLUDED_TYPES]
    names = {m.full_name for m in relevant if m.full_name}

    roots: list[UserProfile] = []
    children: dict[str, list[UserProfile]] = defaultdict(list)
    for member in relevant:
        manager = member.reporting_manager
        if not manager or manager == ROOT_MANAGER_NAME or manager not in names:
            roots.append(member)
        else:
            children[manager].append(member)

    flat: list[TreeNode] = []
    visited: set[str] = set()

    def walk(root: UserProfile) -> None:
        stack: list[tuple[UserProfile, int]] = [(root, 0)]
        while stack:
            node, level = stack.pop()
            if node.id in visited:
                continue
            visited.add(node.id)
            flat.append(TreeNode(member=node, level=level))
            kids = sorted(children.get(node.full_name or "", []), key=_name_key)
            for kid in reversed(kids):
                stack.append((kid, level + 1))

    for root in sorted(roots, key=_name_key):
        walk(root)

    orphans = sorted((m for m in relevant if m.id not in visited), key=_name_key)
    for member in orphans:
        if member.id in visited:
            continue
        logger.warning("Reporting cycle at %s; listing as a root", member.display_name)
        walk(member)

    return flat


def count_pipeline(candidates: Iterable[Candidate]) -> PipelineCounts:
    total = selected = rejected = quit_ = 0
    for c in candidates:
        total += 1
        status = c.status or ""
        stage = c.stage or ""
        if stage in ("Selected", "Joined") or status == "Joined":
            selected += 1
        elif status == "Rejected":
            rejected += 1
        elif status == "Quit":
            quit_ += 1
    pending = max(total - (selected + rejected + quit_), 0)
    return PipelineCounts(total=total, selected=selected, pending=pending, rejected=rejected, quit=quit_)


def team_performance(members: Iterable[UserProfile], candidates: Iterable[Candidate]) -> list[TeamMemberPerformance]:
    """Per-member candidate counts, each manager's row including their whole downline."""
    by_recruiter: dict[str, list[Candidate]] = defaultdict(list)
    for c in candidates:
        if c.recruiter:
            by_recruiter[c.recruiter].append(c)

    tree = build_team_tree(members)
    own = [count_pipeline(by_recruiter.get(n.member.full_name or "", [])) if n.member.full_name else PipelineCounts() for n in tree]

    # Pre-order: a node's subtree is the run of following rows with a deeper level.
    totals = list(own)
    for i in range(len(tree) - 1, -1, -1):
        j = i + 1
        while j < len(tree) and tree[j].level > tree[i].level:
            if tree[j].level == tree[i].level + 1:
                totals[i] = totals[i] + totals[j]
            j += 1

    rows = []
    for node, counts in zip(tree, totals):
        m = node.member
        rows.append(
            TeamMemberPerformance(
                id=m.id,
                team_member=m.display_name,
                full_name=m.full_name,
                email=m.email,
                user_type=m.user_type,
                role=m.role or ("Team Lead" if m.user_type == UserType.TEAMLEAD else "Team Member"),
                reporting_manager=m.reporting_manager,
                level=node.level,
                is_downline=node.level > 0,
                total=counts.total,
                selected=counts.selected,
                pending=counts.pending,
                rejected=counts.rejected,
                quit=counts.quit,
                success_rate=counts.success_rate,
            )
        )
    return rows


def downline(rows: Sequence[TeamMemberPerformance], member_id: str) -> list[TeamMemberPerformance]:
    """The member's own row plus the contiguous following rows with a deeper level."""
    for start, row in enumerate(rows):
        if row.id == member_id:
            out = [row]
            for nxt in rows[start + 1:]:
                if nxt.level <= row.level:
                    break
                out.append(nxt)
            return out
    return []


def downline_names(members: Iterable[UserProfile], member_id: str) -> frozenset[str]:
    """Full names of a team lead and everyone below them."""
    tree = build_team_tree(members)
    for start, node in enumerate(tree):
        if node.member.id == member_id:
            names = {node.member.full_name}
            for nxt in tree[start + 1:]:
                if nxt.level <= node.level:
                    break
                names.add(nxt.member.full_name)
            return frozenset(n for n in names if n)
    return frozenset()
