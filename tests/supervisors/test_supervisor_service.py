import pytest

from src.staffing_portal.staffing_portal.core.exceptions import NotFoundError, ValidationError
from src.staffing_portal.staffing_portal.demo_requests.repository import DemoRequestRepository
from src.staffing_portal.staffing_portal.demo_requests.service import DemoRequestService
from src.staffing_portal.staffing_portal.documents.memory_store import InMemoryDocumentStore
from src.staffing_portal.staffing_portal.supervisors.repository import SupervisorRepository
from src.staffing_portal.staffing_portal.supervisors.service import SupervisorService


@pytest.fixture()
def store():
    return InMemoryDocumentStore()


def test_supervisors_are_scoped_to_their_partner(store):
    service = SupervisorService(SupervisorRepository(store))
    first = service.create({"name": "Meera", "email": "Meera@Store.COM"}, partner_id="p1")
    service.create({"name": "Arjun", "email": "arjun@store.com"}, partner_id="p2")

    assert first.email == "meera@store.com"
    assert first.status == "Active"
    assert [s.name for s in service.list_supervisors("p1")] == ["Meera"]
    assert [s.name for s in service.list_supervisors()] == ["Arjun", "Meera"]


def test_supervisor_status_and_delete(store):
    service = SupervisorService(SupervisorRepository(store))
    sup = service.create({"name": "Meera", "email": "m@s.com"}, partner_id="p1")

    assert service.update(sup.id, {"status": "Inactive"}).status == "Inactive"
    with pytest.raises(ValidationError):
        service.update(sup.id, {"status": "Retired"})
    with pytest.raises(ValidationError):
        service.update(sup.id, {"partner_id": "p9"})

    service.delete(sup.id)
    with pytest.raises(NotFoundError):
        service.delete(sup.id)


def test_demo_requests_start_pending(store):
    service = DemoRequestService(DemoRequestRepository(store))
    with pytest.raises(ValidationError):
        service.create({"company_name": "Acme"})

    req = service.create({"company_name": "Acme", "email": "ops@acme.com", "team_size": 40})
    assert req.status == "Pending"
    assert req.team_size == "40"

    assert service.update(req.id, {"status": "Contacted"}).status == "Contacted"
    assert [r.company_name for r in service.list_requests()] == ["Acme"]
