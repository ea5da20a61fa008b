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


def register_and_login(client: TestClient, email: str, role: str = "counselor") -> str:
    if role == "counselor":
        client.post("/api/auth/register", json={"email": email, "password": "secret123", "role": role})
    else:
        create_staff_user(email, role)
    response = client.post("/api/auth/login", json={"email": email, "password": "secret123"})
    assert response.status_code == 200
    return response.json()["accessToken"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def make_lead_with_history(client: TestClient, token: str) -> dict:
    lead = client.post(
        "/api/leads",
        json={
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phone": "07700 900000",
            "country": "UK",
            "program": "MSc Finance",
        },
        headers=auth(token),
    ).json()
    client.put(f"/api/leads/{lead['id']}", json={"status": "interested"}, headers=auth(token))
    client.put(f"/api/leads/{lead['id']}", json={"city": "Manchester"}, headers=auth(token))
    return lead


def test_convert_creates_student_and_hides_lead():
    client = TestClient(app)
    token = register_and_login(client, "carol@example.com")
    lead = make_lead_with_history(client, token)

    response = client.post(
        "/api/students/convert-from-lead",
        json={"leadId": lead["id"], "name": "Jane Doe", "email": "jane@example.com"},
        headers=auth(token),
    )
    assert response.status_code == 201
    student = response.json()
    assert isinstance(student["id"], int)
    assert student["leadId"] == lead["id"]
    assert student["statusLabel"] == "Open"

    listed = [item["id"] for item in client.get("/api/leads", headers=auth(token)).json()]
    assert lead["id"] not in listed


def test_convert_copies_lead_fields_when_payload_omits_them():
    client = TestClient(app)
    token = register_and_login(client, "carol@example.com")
    lead = make_lead_with_history(client, token)

    student = client.post(
        "/api/students/convert-from-lead", json={"leadId": lead["id"], "budget": "20000"}, headers=auth(token)
    ).json()
    assert student["name"] == "Jane Doe"
    assert student["email"] == "jane@example.com"
    assert student["phone"] == "07700 900000"
    assert student["targetCountry"] == "UK"
    assert student["targetProgram"] == "MSc Finance"
    assert student["counselorId"] == lead["counselorId"]
    assert student["budget"] == "20000"


def test_lead_history_is_copied_not_moved():
    client = TestClient(app)
    token = register_and_login(client, "carol@example.com")
    lead = make_lead_with_history(client, token)
    before = client.get(f"/api/activities/lead/{lead['id']}", headers=auth(token)).json()

    student = client.post("/api/students/convert-from-lead", json={"leadId": lead["id"]}, headers=auth(token)).json()

    after = client.get(f"/api/activities/lead/{lead['id']}", headers=auth(token)).json()
    assert after == before

    student_activities = client.get(f"/api/activities/student/{student['id']}", headers=auth(token)).json()
    assert len(student_activities) == len(before) + 1

    converted = [a for a in student_activities if a["activityType"] == "converted"]
    assert len(converted) == 1
    assert converted[0]["title"] == "Converted from lead"
    assert str(lead["id"]) in converted[0]["description"]

    copies = sorted(
        (a["activityType"], a["title"], a["fieldName"], a["oldValue"], a["newValue"], a["createdAt"])
        for a in student_activities
        if a["activityType"] != "converted"
    )
    originals = sorted(
        (a["activityType"], a["title"], a["fieldName"], a["oldValue"], a["newValue"], a["createdAt"]) for a in before
    )
    assert copies == originals


def test_converting_twice_is_rejected():
    client = TestClient(app)
    token = register_and_login(client, "carol@example.com")
    lead = make_lead_with_history(client, token)
    assert client.post("/api/students/convert-from-lead", json={"leadId": lead["id"]}, headers=auth(token)).status_code == 201
    second = client.post("/api/students/convert-from-lead", json={"leadId": lead["id"]}, headers=auth(token))
    assert second.status_code == 400
    assert "already been converted" in second.json()["message"]


def test_convert_unknown_or_hidden_lead_returns_404():
    client = TestClient(app)
    alice = register_and_login(client, "alice@example.com")
    bob = register_and_login(client, "bob@example.com")
    lead = client.post("/api/leads", json={"name": "A", "email": "a@example.com"}, headers=auth(alice)).json()

    assert client.post("/api/students/convert-from-lead", json={"leadId": 9999}, headers=auth(alice)).status_code == 404
    assert client.post("/api/students/convert-from-lead", json={"leadId": lead["id"]}, headers=auth(bob)).status_code == 404


def test_direct_student_create_with_unknown_lead_returns_404():
    client = TestClient(app)
    token = register_and_login(client, "admin@example.com", role="admin_staff")
    response = client.post(
        "/api/students", json={"name": "S", "email": "s@example.com", "leadId": 424242}, headers=auth(token)
    )
    assert response.status_code == 404
