import pytest

from src.staffing_portal.staffing_portal.core.enums import ResignationStatus, UserType
from src.staffing_portal.staffing_portal.core.exceptions import AuthorizationError, ValidationError
from src.staffing_portal.staffing_portal.documents.memory_store import InMemoryDocumentStore
from src.staffing_portal.staffing_portal.resignations.repository import ResignationRepository
from src.staffing_portal.staffing_portal.resignations.service import ResignationService


@pytest.fixture()
def service():
    return ResignationService(ResignationRepository(InMemoryDocumentStore()))


def test_one_pending_resignation_at_a_time(service):
    res = service.submit(employee_id="e1", employee_name="Ravi", reason="Moving cities")
    assert res.status == ResignationStatus.PENDING
    with pytest.raises(ValidationError):
        service.submit(employee_id="e1", employee_name="Ravi", reason="Again")


def test_hr_approves_with_notice_dates(service):
    res = service.submit(employee_id="e1", employee_name="Ravi", reason="Moving cities")
    with pytest.raises(ValidationError):
        service.approve(
            current_type=UserType.HR,
            resignation_id=res.id,
            notice_period_start_date="2025-05-10",
            last_working_day="2025-05-01",
        )

    approved = service.approve(
        current_type=UserType.HR,
        resignation_id=res.id,
        notice_period_start_date="2025-05-01",
        last_working_day="2025-05-31",
    )
    assert approved.status == ResignationStatus.APPROVED
    assert approved.last_working_day == "2025-05-31"

    with pytest.raises(ValidationError):
        service.reject(current_type=UserType.HR, resignation_id=res.id, hr_remarks="too late")

    service.submit(employee_id="e1", employee_name="Ravi", reason="Second time")


def test_rejection_needs_remarks_and_hr_role(service):
    res = service.submit(employee_id="e1", employee_name="Ravi", reason="Moving cities")
    with pytest.raises(AuthorizationError):
        service.reject(current_type=UserType.TEAM, resignation_id=res.id, hr_remarks="no")
    with pytest.raises(ValidationError):
        service.reject(current_type=UserType.HR, resignation_id=res.id, hr_remarks="  ")

    rejected = service.reject(current_type=UserType.ADMIN, resignation_id=res.id, hr_remarks="Please stay")
    assert rejected.status == ResignationStatus.REJECTED
