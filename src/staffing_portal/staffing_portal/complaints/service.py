from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_str, require_non_empty
from ..core.enums import TicketStatus, UserType
from ..core.exceptions import ValidationError
from ..documents.listeners import Unsubscribe
from .model import TICKET_CATEGORIES, Ticket, TicketSummary
from .repository import TicketRepository

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = frozenset({TicketStatus.OPEN, TicketStatus.IN_PROGRESS})
CLOSED_STATUSES = frozenset({TicketStatus.RESOLVED})


def filter_tickets(tickets: Iterable[Ticket], status_filter: str = "All") -> list[Ticket]:
    """'All', 'Active' (Open + In Progress), 'Closed' (Resolved) or an exact status."""
    items = list(tickets)
    if not status_filter or status_filter == "All":
        return items
    if status_filter == "Active":
        return [t for t in items if t.status in ACTIVE_STATUSES]
    if status_filter == "Closed":
        return [t for t in items if t.status in CLOSED_STATUSES]
    return [t for t in items if t.status.value == status_filter]


def summarize_tickets(tickets: Iterable[Ticket]) -> TicketSummary:
    items = list(tickets)
    return TicketSummary(
        total=len(items),
        active=sum(1 for t in items if t.status in ACTIVE_STATUSES),
        resolved=sum(1 for t in items if t.status in CLOSED_STATUSES),
    )


class ComplaintService:
    def __init__(self, tickets: TicketRepository):
        self._tickets = tickets

    def create(
        self,
        *,
        submitted_by: str,
        submitted_by_id: Optional[str],
        user_type: UserType,
        subject: str,
        category: str,
        description: str,
    ) -> Ticket:
        if category not in TICKET_CATEGORIES:
            raise ValidationError("Unknown ticket category")
        ticket = Ticket(
            submitted_by=require_non_empty(submitted_by, "Submitted by"),
            submitted_by_id=submitted_by_id,
            user_type=user_type,
            subject=require_non_empty(subject, "Subject"),
            category=category,
            description=require_non_empty(description, "Description"),
            status=TicketStatus.OPEN,
            submitted_date=now_local().isoformat(),
        )
        created = self._tickets.add(ticket)
        logger.info("Ticket %s opened by %s", created.id, submitted_by)
        return created

    def update_status(self, ticket_id: str, status: str, hr_remarks: str = "") -> Ticket:
        self._tickets.require(ticket_id)
        try:
            new_status = TicketStatus(status)
        except ValueError:
            raise ValidationError("Invalid ticket status")
        changes = {"status": new_status, "hr_remarks": optional_str(hr_remarks)}
        if new_status == TicketStatus.RESOLVED:
            changes["resolved_date"] = now_local().isoformat()
        return self._tickets.update(ticket_id, changes)

    def list_tickets(self, status_filter: str = "All") -> list[Ticket]:
        return filter_tickets(self._tickets.list_latest(), status_filter)

    def list_for_user(self, user_id: str) -> list[Ticket]:
        return self._tickets.list_for_user(user_id)

    def summary(self) -> TicketSummary:
        return summarize_tickets(self._tickets.all())

    def listen(self, callback: Callable[[list[Ticket]], None]) -> Unsubscribe:
        return self._tickets.on_change(callback)
