import pytest

from src.staffing_portal.staffing_portal.complaints.repository import TicketRepository
from src.staffing_portal.staffing_portal.complaints.service import ComplaintService
from src.staffing_portal.staffing_portal.core.enums import TicketStatus, UserType
from src.staffing_portal.staffing_portal.core.exceptions import NotFoundError, ValidationError
from src.staffing_portal.staffing_portal.documents.memory_store import InMemoryDocumentStore


@pytest.fixture()
def service():
    return ComplaintService(TicketRepository(InMemoryDocumentStore()))


def open_ticket(service, subject="Salary late", by_id="c1"):
    return service.create(
        submitted_by="Ravi",
        submitted_by_id=by_id,
        user_type=UserType.CANDIDATE,
        subject=subject,
        category="Payroll",
        description="Not paid yet",
    )


def test_new_ticket_is_open_and_dated(service):
    ticket = open_ticket(service)
    assert ticket.status == TicketStatus.OPEN
    assert ticket.submitted_date
    assert ticket.resolved_date is None


def test_unknown_category_is_rejected(service):
    with pytest.raises(ValidationError):
        service.create(
            submitted_by="Ravi", submitted_by_id="c1", user_type=UserType.CANDIDATE,
            subject="x", category="Gossip", description="y",
        )


def test_resolving_stamps_resolved_date_and_remarks(service):
    ticket = open_ticket(service)
    in_progress = service.update_status(ticket.id, "In Progress", "Looking into it")
    assert in_progress.resolved_date is None

    resolved = service.update_status(ticket.id, "Resolved", "Paid today")
    assert resolved.status == TicketStatus.RESOLVED
    assert resolved.resolved_date
    assert resolved.hr_remarks == "Paid today"

    with pytest.raises(ValidationError):
        service.update_status(ticket.id, "Done")
    with pytest.raises(NotFoundError):
        service.update_status("missing", "Resolved")


def test_status_filters_and_summary(service):
    a = open_ticket(service, "a")
    b = open_ticket(service, "b")
    open_ticket(service, "c", by_id="c2")
    service.update_status(a.id, "Resolved")
    service.update_status(b.id, "In Progress")

    assert len(service.list_tickets("All")) == 3
    assert {t.subject for t in service.list_tickets("Active")} == {"b", "c"}
    assert [t.subject for t in service.list_tickets("Closed")] == ["a"]
    assert [t.subject for t in service.list_tickets("In Progress")] == ["b"]

    summary = service.summary()
    assert (summary.total, summary.active, summary.resolved) == (3, 2, 1)
    assert {t.subject for t in service.list_for_user("c1")} == {"a", "b"}
