import pytest

from src.staffing_portal.staffing_portal.candidates.model import Candidate
from src.staffing_portal.staffing_portal.core.enums import UserType
from src.staffing_portal.staffing_portal.main import create_app

PASSWORDS = {
    UserType.ADMIN: ("admin@test.local", "admin123"),
    UserType.PARTNER: ("partner@test.local", "partner123"),
    UserType.TEAM: ("team@test.local", "team123"),
}


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    users = app.extensions["container"].user_service
    for user_type, (email, password) in PASSWORDS.items():
        users.create_profile(email=email, password=password, user_type=user_type, full_name=user_type.value.title())
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, user_type):
    email, password = PASSWORDS[user_type]
    return client.post("/api/login", json={"email": email, "password": password})


def test_login_me_logout(client):
    assert client.get("/api/me").status_code == 401

    resp = login(client, UserType.ADMIN)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["user_type"] == "ADMIN"

    me = client.get("/api/me").get_json()["data"]
    assert me["email"] == "admin@test.local"
    assert "password_hash" not in me

    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_bad_credentials_are_json_401(client):
    resp = client.post("/api/login", json={"email": "admin@test.local", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid email or password"}


def test_role_guard_returns_403(client):
    login(client, UserType.TEAM)
    resp = client.get("/api/dashboard/admin")
    assert resp.status_code == 403
    assert resp.get_json()["success"] is False


def test_unknown_route_uses_json_error(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_lineup_then_list(client):
    login(client, UserType.TEAM)
    resp = client.post("/api/candidates", json={"name": "Ravi", "phone": "98765 43210", "role": "Cashier"})
    assert resp.status_code == 201
    created = resp.get_json()["data"]
    assert created["email"] == "9876543210@lineup.local"
    assert created["recruiter"] == "Team"

    again = client.post("/api/candidates", json={"name": "Ravi", "phone": "98765 43210", "role": "Cashier"})
    assert again.status_code == 200
    assert again.get_json()["data"]["id"] == created["id"]

    listing = client.get("/api/candidates").get_json()["data"]
    assert [c["id"] for c in listing["candidates"]] == [created["id"]]

    missing_phone = client.post("/api/candidates", json={"name": "Asha"})
    assert missing_phone.status_code == 400


def test_requirement_review_flow(client):
    login(client, UserType.PARTNER)
    resp = client.post("/api/partner/requirements", json={"title": "Cashier", "client": "Acme", "openings": 2})
    assert resp.status_code == 201
    req_id = resp.get_json()["data"]["id"]
    assert resp.get_json()["data"]["submission_status"] == "Pending Review"

    assert client.post(f"/api/requirements/{req_id}/approve").status_code == 403

    client.post("/api/logout")
    login(client, UserType.ADMIN)
    approved = client.post(f"/api/requirements/{req_id}/approve", json={"admin_note": "ok"})
    assert approved.get_json()["data"]["submission_status"] == "Approved"

    again = client.post(f"/api/requirements/{req_id}/reject")
    assert again.status_code == 400
    assert client.post("/api/requirements/missing/approve").status_code == 404


def test_admin_dashboard_counts_candidates(client):
    login(client, UserType.TEAM)
    client.post("/api/candidates", json={"name": "Ravi", "phone": "9876543210", "role": "Cashier"})
    client.post("/api/logout")

    login(client, UserType.ADMIN)
    resp = client.get("/api/dashboard/admin")
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["pipeline"]["active"] == 1
    assert data["roles"] == [{"name": "Cashier", "count": 1}]


def test_profile_edit_is_limited_to_personal_fields(client):
    login(client, UserType.TEAM)
    denied = client.patch("/api/profile", json={"salary": 999999, "reporting_manager": "Nobody"})
    assert denied.status_code == 403
    assert client.get("/api/me").get_json()["data"]["salary"] is None

    allowed = client.patch("/api/profile", json={"phone": "9000000000"})
    assert allowed.status_code == 200
    assert allowed.get_json()["data"]["phone"] == "9000000000"


def test_requirement_owners_match_between_dashboard_and_report(app, client):
    container = app.extensions["container"]
    users = container.user_service
    users.create_profile(email="zara@test.local", password="zara123", user_type=UserType.TEAMLEAD, full_name="Zara")
    users.create_profile(
        email="abe@test.local", password="abe123", user_type=UserType.TEAM, full_name="Abe", reporting_manager="Zara"
    )
    users.create_profile(email="mia@test.local", password="mia123", user_type=UserType.TEAM, full_name="Mia")
    container.job_service.create({"title": "Cashier", "company": "Acme", "number_of_openings": 2})

    login(client, UserType.ADMIN)
    dashboard = client.get("/api/dashboard/admin").get_json()["data"]["requirement_breakdown"]
    report = client.get("/api/reports/requirements").get_json()["data"]

    assert [row["name"] for row in dashboard["team"]] == ["Mia"]
    assert [row["name"] for row in report["team"]] == ["Mia"]


def test_candidate_stream_hides_other_recruiters(app, client):
    repo = app.extensions["container"].candidates_repo
    repo.put("c1", Candidate(name="Mine", recruiter="Team"))
    repo.put("c2", Candidate(name="Secret", recruiter="Other"))

    login(client, UserType.TEAM)
    listed = client.get("/api/candidates").get_json()["data"]["candidates"]
    assert [c["name"] for c in listed] == ["Mine"]

    resp = client.get("/api/stream/candidates", buffered=False)
    assert resp.mimetype == "text/event-stream"
    chunk = next(resp.response)
    resp.close()
    first_event = chunk.decode() if isinstance(chunk, bytes) else chunk
    assert '"Mine"' in first_event
    assert "Secret" not in first_event
