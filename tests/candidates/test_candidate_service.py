import pytest

from src.staffing_portal.staffing_portal.candidates.document_candidate_repository import DocumentCandidateRepository
from src.staffing_portal.staffing_portal.candidates.service import CandidateService, TransferRequest
from src.staffing_portal.staffing_portal.core.enums import UserType
from src.staffing_portal.staffing_portal.core.exceptions import NotFoundError, ValidationError
from src.staffing_portal.staffing_portal.documents.memory_store import InMemoryDocumentStore
from src.staffing_portal.staffing_portal.users.document_user_repository import DocumentUserRepository
from src.staffing_portal.staffing_portal.users.service import UserService


@pytest.fixture()
def store():
    return InMemoryDocumentStore()


@pytest.fixture()
def users(store):
    return UserService(DocumentUserRepository(store))


@pytest.fixture()
def service(store, users):
    return CandidateService(DocumentCandidateRepository(store), users, default_password="password123")


def lineup(**overrides):
    payload = {
        "name": "Ravi",
        "email": "ravi@example.com",
        "phone": "9876543210",
        "role": "Cashier",
        "vendor": "Acme",
        "partner_name": "Acme Partners",
        "store_location": "Central Mall",
        "location": "Bengaluru",
    }
    payload.update(overrides)
    return payload


def test_lineup_creates_candidate_profile_and_record(service, users):
    result = service.create_lineup(lineup(), recruiter="Tia")

    assert result.updated is False
    c = result.candidate
    assert c.stage == "Sourced"
    assert c.status == "Active"
    assert c.call_status == "Applied"
    assert c.recruiter == "Tia"
    assert c.applied_date

    profile = users.find_by_email("ravi@example.com")
    assert profile.user_type == UserType.CANDIDATE
    assert c.user_id == profile.id


def test_lineup_for_known_candidate_updates_existing_record(service):
    first = service.create_lineup(lineup(), recruiter="Tia").candidate
    second = service.create_lineup(lineup(role="Store Manager"), recruiter="Sam")

    assert second.updated is True
    assert second.candidate.id == first.id
    assert second.candidate.role == "Store Manager"
    assert second.candidate.recruiter == "Sam"
    assert len(service.list_candidates()) == 1


def test_lineup_without_email_uses_phone_address(service):
    c = service.create_lineup(lineup(email="", phone="+91 98765-43210"), recruiter="Tia").candidate
    assert c.email == "919876543210@lineup.local"


def test_direct_vendor_clears_partner_name(service):
    c = service.create_lineup(lineup(vendor="Direct"), recruiter="Tia").candidate
    assert c.partner_name is None


def test_interested_lineup_requires_interview_date(service):
    with pytest.raises(ValidationError):
        service.create_lineup(lineup(call_status="Interested"), recruiter="Tia")

    c = service.create_lineup(
        lineup(call_status="Interested", interview_date="2025-03-10T11:00"), recruiter="Tia"
    ).candidate
    assert c.stage == "Interview"
    assert c.interview_date.startswith("2025-03-10T11:00")


def test_submit_application_starts_pending_in_applied_stage(service):
    c = service.submit_application({"name": "Asha", "email": "asha@x.com", "role": "Cashier"}, user_id="u1")
    assert c.stage == "Applied"
    assert c.status == "Pending"
    assert c.user_id == "u1"


def test_move_stage_validates_stage(service):
    c = service.create_lineup(lineup(), recruiter="Tia").candidate
    assert service.move_stage(c.id, "Selected").stage == "Selected"
    with pytest.raises(ValidationError):
        service.move_stage(c.id, "Hired")


def test_transfer_to_interview_and_back_to_sourced(service):
    c = service.create_lineup(lineup(), recruiter="Tia").candidate

    moved = service.transfer(
        c.id,
        TransferRequest(
            vendor="Globex",
            role="Sales",
            location="Chennai",
            store_location="Marina",
            call_status="Interested",
            interview_date="2025-04-01T10:00",
            interview_details="Bring ID",
        ),
    )
    assert moved.stage == "Interview"
    assert moved.vendor == "Globex"
    assert moved.interview_details == "Bring ID"

    back = service.transfer(
        c.id, TransferRequest(vendor="Direct", role="Sales", location="Chennai", store_location="Marina")
    )
    assert back.stage == "Sourced"
    assert back.interview_date is None
    assert back.interview_details is None
    assert back.partner_name is None


def test_mark_quit_sets_status_and_date(service):
    c = service.create_lineup(lineup(), recruiter="Tia").candidate
    quit_ = service.mark_quit(c.id, "2025-02-01")
    assert quit_.status == "Quit"
    assert quit_.quit_date.startswith("2025-02-01")


def test_delete_unknown_candidate_raises(service):
    with pytest.raises(NotFoundError):
        service.delete("missing")


def test_legacy_direct_application_reads_as_applied(store, service):
    store.set("candidates", "old", {"name": "Old", "call_status": "Direct Application"})
    assert service.get("old").call_status == "Applied"
