import pytest
from fastapi.testclient import TestClient

from backend.app.core.security import get_password_hash
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_staff_user(email: str, role: str, password: str = "secret123") -> None:
    with SessionLocal() as db:
        db.add(User(email=email, role=role, hashed_password=get_password_hash(password), is_active=True))
        db.commit()


def register_and_login(client: TestClient, email: str, role: str = "admin_staff") -> str:
    if role == "counselor":
        client.post("/api/auth/register", json={"email": email, "password": "secret123", "role": role})
    else:
        create_staff_user(email, role)
    response = client.post("/api/auth/login", json={"email": email, "password": "secret123"})
    assert response.status_code == 200
    return response.json()["accessToken"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_off_flow_lead_move_is_accepted_and_flagged():
    client = TestClient(app)
    token = register_and_login(client, "admin@example.com")
    lead = client.post(
        "/api/leads", json={"name": "L", "email": "l@example.com", "status": "follow_up"}, headers=auth(token)
    ).json()

    response = client.put(f"/api/leads/{lead['id']}", json={"status": "new"}, headers=auth(token))
    assert response.status_code == 200
    assert response.json()["status"] == "new"

    activities = client.get(f"/api/activities/lead/{lead['id']}", headers=auth(token)).json()
    assert sorted(a["activityType"] for a in activities) == ["created", "flagged", "updated"]
    flagged = next(a for a in activities if a["activityType"] == "flagged")
    assert flagged["title"] == "Status change flagged"
    assert flagged["fieldName"] == "status"
    assert (flagged["oldValue"], flagged["newValue"]) == ("follow_up", "new")


def test_usual_lead_move_is_not_flagged():
    client = TestClient(app)
    token = register_and_login(client, "admin@example.com")
    lead = client.post(
        "/api/leads", json={"name": "L", "email": "l@example.com", "status": "lost"}, headers=auth(token)
    ).json()
    assert lead["isLost"] is True

    response = client.put(f"/api/leads/{lead['id']}", json={"status": "new"}, headers=auth(token))
    assert response.status_code == 200
    assert response.json()["isLost"] is False
    activities = client.get(f"/api/activities/lead/{lead['id']}", headers=auth(token)).json()
    assert sorted(a["activityType"] for a in activities) == ["created", "updated"]


def test_lead_update_with_unknown_status_is_validation_error():
    client = TestClient(app)
    token = register_and_login(client, "admin@example.com")
    lead = client.post("/api/leads", json={"name": "L", "email": "l@example.com"}, headers=auth(token)).json()
    response = client.put(f"/api/leads/{lead['id']}", json={"status": "enrolled"}, headers=auth(token))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid data"


def test_application_status_transitions():
    client = TestClient(app)
    token = register_and_login(client, "admin@example.com")
    student = client.post("/api/students", json={"name": "S", "email": "s@example.com"}, headers=auth(token)).json()
    application = client.post(
        "/api/applications",
        json={"studentId": student["id"], "university": "Bath", "program": "BSc", "appStatus": "Closed"},
        headers=auth(token),
    ).json()

    flagged = client.put(
        f"/api/applications/{application['id']}", json={"appStatus": "Needs Attention"}, headers=auth(token)
    )
    assert flagged.status_code == 200
    kinds = [
        a["activityType"]
        for a in client.get(f"/api/activities/application/{application['id']}", headers=auth(token)).json()
    ]
    assert kinds.count("flagged") == 1
    reopened = client.put(f"/api/applications/{application['id']}", json={"appStatus": "Open"}, headers=auth(token))
    assert reopened.status_code == 200
    assert reopened.json()["appStatus"] == "Open"


def test_approved_visa_can_be_corrected():
    client = TestClient(app)
    token = register_and_login(client, "admin@example.com")
    student = client.post("/api/students", json={"name": "S", "email": "s@example.com"}, headers=auth(token)).json()
    application = client.post(
        "/api/applications",
        json={"studentId": student["id"], "university": "Bath", "program": "BSc"},
        headers=auth(token),
    ).json()
    admission = client.post(
        "/api/admissions",
        json={
            "applicationId": application["id"],
            "studentId": student["id"],
            "university": "Bath",
            "program": "BSc",
            "decision": "Offer",
        },
        headers=auth(token),
    ).json()
    assert admission["visaStatus"] == "pending"

    for step in ("applied", "approved"):
        response = client.put(f"/api/admissions/{admission['id']}", json={"visaStatus": step}, headers=auth(token))
        assert response.status_code == 200

    response = client.put(f"/api/admissions/{admission['id']}", json={"visaStatus": "rejected"}, headers=auth(token))
    assert response.status_code == 200
    assert response.json()["visaStatus"] == "rejected"
    activities = client.get(f"/api/activities/admission/{admission['id']}", headers=auth(token)).json()
    flagged = [a for a in activities if a["activityType"] == "flagged"]
    assert [(a["oldValue"], a["newValue"]) for a in flagged] == [("approved", "rejected")]

    unknown = client.put(f"/api/admissions/{admission['id']}", json={"visaStatus": "granted"}, headers=auth(token))
    assert unknown.status_code == 400


def test_application_status_progress_prefers_configured_dropdowns():
    client = TestClient(app)
    token = register_and_login(client, "admin@example.com")
    for sequence, key in enumerate(["Open", "Closed"]):
        client.post(
            "/api/dropdowns",
            json={"moduleName": "applications", "fieldName": "app_status", "key": key, "value": key, "sequence": sequence},
            headers=auth(token),
        )
    student = client.post("/api/students", json={"name": "S", "email": "s@example.com"}, headers=auth(token)).json()
    application = client.post(
        "/api/applications",
        json={"studentId": student["id"], "university": "Bath", "program": "BSc", "appStatus": "Closed"},
        headers=auth(token),
    ).json()

    data = client.get(f"/api/applications/{application['id']}/status-progress", headers=auth(token)).json()
    assert data["field"] == "appStatus"
    assert [step["key"] for step in data["steps"]] == ["Open", "Closed"]
    assert [step["completed"] for step in data["steps"]] == [True, True]
