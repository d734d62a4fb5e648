import pytest

from src.staffing_portal.staffing_portal.attendance.repository import (
    MonthlyAttendanceRepository,
    StoreAttendanceRepository,
    WorkShiftRepository,
)
from src.staffing_portal.staffing_portal.attendance.service import (
    AttendanceService,
    ShiftService,
    StoreAttendanceService,
)
from src.staffing_portal.staffing_portal.candidates.document_candidate_repository import DocumentCandidateRepository
from src.staffing_portal.staffing_portal.candidates.model import Candidate
from src.staffing_portal.staffing_portal.core.enums import StoreAttendanceStatus, WorkShiftStatus
from src.staffing_portal.staffing_portal.core.exceptions import NotFoundError, ValidationError
from src.staffing_portal.staffing_portal.documents.memory_store import InMemoryDocumentStore


@pytest.fixture()
def store():
    return InMemoryDocumentStore()


def test_monthly_attendance_prorates_payable(store):
    service = AttendanceService(MonthlyAttendanceRepository(store))
    row = service.add_record(month="2025-02", candidate_name="Ravi", base_commission="2800")
    assert row.days_in_month == 28
    assert row.payable == 0

    saved = service.save_days_present(row.record.id, 14)
    assert saved.record.days_present == 14
    assert saved.payable == 1400
    assert [r.record.id for r in service.list_month("2025-02")] == [row.record.id]


def test_days_present_must_fit_the_month(store):
    service = AttendanceService(MonthlyAttendanceRepository(store))
    row = service.add_record(month="2025-02", candidate_name="Ravi")
    assert row.payable is None

    with pytest.raises(ValidationError):
        service.save_days_present(row.record.id, 29)
    with pytest.raises(ValidationError):
        service.save_days_present(row.record.id, -1)
    with pytest.raises(ValidationError):
        service.add_record(month="Feb 2025", candidate_name="Ravi")


@pytest.fixture()
def store_service(store):
    candidates = DocumentCandidateRepository(store)
    candidates.put("e1", Candidate(name="Zara", status="Joined", supervisor_email="s@x.com"))
    candidates.put("e2", Candidate(name="amit", stage="Joined", supervisor_email="s@x.com"))
    candidates.put("e3", Candidate(name="Noor", status="Active", supervisor_email="s@x.com"))
    candidates.put("e4", Candidate(name="Olu", status="Joined", supervisor_email="other@x.com"))
    return StoreAttendanceService(StoreAttendanceRepository(store), candidates)


def test_store_employees_are_joined_candidates_of_the_supervisor(store_service):
    assert [e.id for e in store_service.store_employees("s@x.com")] == ["e2", "e1"]


def test_unsaved_day_defaults_to_absent(store_service):
    marks = store_service.attendance_for_date("s@x.com", "2025-05-01")
    assert marks == {"e2": StoreAttendanceStatus.ABSENT, "e1": StoreAttendanceStatus.ABSENT}


def test_save_day_writes_every_employee_and_summarises(store_service):
    saved = store_service.save_day("s@x.com", "2025-05-01", {"e1": "Present"})
    assert {r.employee_id: r.status for r in saved} == {
        "e1": StoreAttendanceStatus.PRESENT,
        "e2": StoreAttendanceStatus.ABSENT,
    }
    assert store_service.daily_summary("s@x.com", "2025-05-01") == {
        "Present": 1,
        "Absent": 1,
        "Leave": 0,
        "Week Off": 0,
    }

    store_service.save_day("s@x.com", "2025-05-01", {"e1": "Leave", "e2": "Present"})
    assert store_service.daily_summary("s@x.com", "2025-05-01")["Leave"] == 1


def test_save_day_rejects_unknown_employees_and_statuses(store_service):
    with pytest.raises(ValidationError):
        store_service.save_day("s@x.com", "2025-05-01", {"e4": "Present"})
    with pytest.raises(ValidationError):
        store_service.save_day("s@x.com", "2025-05-01", {"e1": "Holiday"})
    with pytest.raises(ValidationError):
        store_service.save_day("s@x.com", "01/05/2025", {})


def test_monthly_sheet_lists_status_per_day(store_service):
    store_service.save_day("s@x.com", "2025-04-03", {"e1": "Present"})
    sheet = {row["employee"].id: row for row in store_service.monthly_sheet("s@x.com", "2025-04")}

    assert len(sheet["e1"]["days"]) == 30
    assert sheet["e1"]["days"][3] == "Present"
    assert sheet["e1"]["days"][4] is None
    assert sheet["e1"]["present"] == 1
    assert sheet["e2"]["days"][3] == "Absent"


def test_shift_start_and_end(store):
    shifts = ShiftService(WorkShiftRepository(store))
    started = shifts.start("u1")
    assert started.status == WorkShiftStatus.ACTIVE
    with pytest.raises(ValidationError):
        shifts.start("u1")

    ended = shifts.end("u1")
    assert ended.status == WorkShiftStatus.COMPLETED
    assert ended.end_time
    assert shifts.active_shift("u1") is None
    with pytest.raises(NotFoundError):
        shifts.end("u1")
