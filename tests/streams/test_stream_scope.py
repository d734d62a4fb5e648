from src.staffing_portal.staffing_portal.candidates.filters import Viewer
from src.staffing_portal.staffing_portal.core.enums import UserType
from src.staffing_portal.staffing_portal.documents.store import Document
from src.staffing_portal.staffing_portal.streams.controller import format_event, scope_snapshot


def test_candidate_snapshot_follows_recruiter_visibility():
    docs = [
        Document("c1", {"name": "Mine", "recruiter": "Tia"}),
        Document("c2", {"name": "Secret", "recruiter": "Other"}),
    ]
    viewer = Viewer(user_type=UserType.TEAM, full_name="Tia", email="tia@x.com")
    assert [d.id for d in scope_snapshot("candidates", docs, viewer, "u1")] == ["c1"]

    admin = Viewer(user_type=UserType.ADMIN, full_name="Boss", email="boss@x.com")
    assert len(scope_snapshot("candidates", docs, admin, "a1")) == 2


def test_partner_only_sees_own_requirements_and_supervisors():
    docs = [
        Document("r1", {"title": "Cashier", "partner_id": "p1"}),
        Document("r2", {"title": "Packer", "partner_id": "p2"}),
    ]
    partner = Viewer(user_type=UserType.PARTNER, full_name="P", email="p@x.com")
    for collection in ("partnerRequirements", "storeSupervisors"):
        assert [d.id for d in scope_snapshot(collection, docs, partner, "p1")] == ["r1"]

    lead = Viewer(user_type=UserType.TEAMLEAD, full_name="L", email="l@x.com")
    assert len(scope_snapshot("partnerRequirements", docs, lead, "l1")) == 2


def test_supervisor_store_attendance_is_their_own():
    docs = [
        Document("a1", {"employee_id": "c1", "supervisor_email": "s@x.com"}),
        Document("a2", {"employee_id": "c2", "supervisor_email": "other@x.com"}),
    ]
    sup = Viewer(user_type=UserType.STORE_SUPERVISOR, full_name="S", email="s@x.com")
    assert [d.id for d in scope_snapshot("storeAttendance", docs, sup, "s1")] == ["a1"]


def test_format_event_is_one_sse_data_line():
    event = format_event([Document("j1", {"title": "Cashier"})])
    assert event == 'data: [{"id": "j1", "title": "Cashier"}]\n\n'
