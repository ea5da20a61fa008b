import pytest
from fastapi.testclient import TestClient

from backend.app.core.exceptions import AccessDeniedError, NotFoundError
from backend.app.core.security import get_password_hash
from backend.app.crud.crud_lead import lead_crud
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


def register_and_login(client: TestClient, email: str, role: str = "counselor") -> tuple[str, int]:
    if role == "counselor":
        client.post("/api/auth/register", json={"email": email, "password": "secret123", "role": role})
    else:
        create_staff_user(email, role)
    response = client.post("/api/auth/login", json={"email": email, "password": "secret123"})
    assert response.status_code == 200
    data = response.json()
    return data["accessToken"], data["user"]["id"]


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_counselor_sees_only_assigned_leads():
    client = TestClient(app)
    alice, _ = register_and_login(client, "alice@example.com")
    bob, _ = register_and_login(client, "bob@example.com")
    admin, _ = register_and_login(client, "admin@example.com", role="admin_staff")

    alice_lead = client.post("/api/leads", json={"name": "A", "email": "a@example.com"}, headers=auth(alice)).json()
    bob_lead = client.post("/api/leads", json={"name": "B", "email": "b@example.com"}, headers=auth(bob)).json()

    assert [lead["id"] for lead in client.get("/api/leads", headers=auth(alice)).json()] == [alice_lead["id"]]
    assert [lead["id"] for lead in client.get("/api/leads", headers=auth(bob)).json()] == [bob_lead["id"]]
    assert len(client.get("/api/leads", headers=auth(admin)).json()) == 2


def test_other_counselors_lead_looks_missing():
    client = TestClient(app)
    alice, _ = register_and_login(client, "alice@example.com")
    bob, _ = register_and_login(client, "bob@example.com")
    lead = client.post("/api/leads", json={"name": "A", "email": "a@example.com"}, headers=auth(alice)).json()

    hidden = client.get(f"/api/leads/{lead['id']}", headers=auth(bob))
    missing = client.get("/api/leads/9999", headers=auth(bob))
    assert hidden.status_code == missing.status_code == 404
    assert hidden.json() == missing.json()
    assert client.put(f"/api/leads/{lead['id']}", json={"name": "Hijack"}, headers=auth(bob)).status_code == 404
    assert client.delete(f"/api/leads/{lead['id']}", headers=auth(bob)).status_code == 404


def test_access_denied_is_distinguishable_in_crud():
    client = TestClient(app)
    alice, alice_id = register_and_login(client, "alice@example.com")
    _, bob_id = register_and_login(client, "bob@example.com")
    lead = client.post("/api/leads", json={"name": "A", "email": "a@example.com"}, headers=auth(alice)).json()

    with SessionLocal() as db:
        assert lead_crud.get(db, lead["id"], user_id=alice_id, user_role="counselor").id == lead["id"]
        with pytest.raises(AccessDeniedError) as denied:
            lead_crud.get(db, lead["id"], user_id=bob_id, user_role="counselor")
        assert denied.value.record_id == lead["id"]
        with pytest.raises(NotFoundError) as missing:
            lead_crud.get(db, 9999, user_id=bob_id, user_role="counselor")
        assert not isinstance(missing.value, AccessDeniedError)


def test_admin_can_assign_lead_to_counselor():
    client = TestClient(app)
    admin, _ = register_and_login(client, "admin@example.com", role="admin_staff")
    counselor, counselor_id = register_and_login(client, "carol@example.com")
    lead = client.post(
        "/api/leads",
        json={"name": "Assigned", "email": "assigned@example.com", "counselorId": counselor_id},
        headers=auth(admin),
    ).json()
    assert client.get(f"/api/leads/{lead['id']}", headers=auth(counselor)).status_code == 200


def test_converted_leads_are_excluded_from_listing():
    client = TestClient(app)
    admin, _ = register_and_login(client, "admin@example.com", role="branch_manager")
    kept = client.post("/api/leads", json={"name": "Kept", "email": "kept@example.com"}, headers=auth(admin)).json()
    converted = client.post("/api/leads", json={"name": "Conv", "email": "conv@example.com"}, headers=auth(admin)).json()
    response = client.post("/api/students/convert-from-lead", json={"leadId": converted["id"]}, headers=auth(admin))
    assert response.status_code == 201

    ids = [lead["id"] for lead in client.get("/api/leads", headers=auth(admin)).json()]
    assert ids == [kept["id"]]
    # still reachable by id for history
    assert client.get(f"/api/leads/{converted['id']}", headers=auth(admin)).status_code == 200


def test_student_scoping_for_counselors_and_admission_officers():
    client = TestClient(app)
    admin, _ = register_and_login(client, "admin@example.com", role="admin_staff")
    counselor, counselor_id = register_and_login(client, "carol@example.com")
    officer, officer_id = register_and_login(client, "olga@example.com", role="admission_officer")
    other_officer, _ = register_and_login(client, "omar@example.com", role="admission_officer")

    mine = client.post(
        "/api/students",
        json={"name": "S1", "email": "s1@example.com", "counselorId": counselor_id, "admissionOfficerId": officer_id},
        headers=auth(admin),
    ).json()
    client.post("/api/students", json={"name": "S2", "email": "s2@example.com"}, headers=auth(admin))

    assert [s["id"] for s in client.get("/api/students", headers=auth(counselor)).json()] == [mine["id"]]
    assert [s["id"] for s in client.get("/api/students", headers=auth(officer)).json()] == [mine["id"]]
    assert client.get("/api/students", headers=auth(other_officer)).json() == []
    assert client.get(f"/api/students/{mine['id']}", headers=auth(other_officer)).status_code == 404
    assert len(client.get("/api/students", headers=auth(admin)).json()) == 2


def test_applications_and_admissions_follow_student_assignment():
    client = TestClient(app)
    admin, _ = register_and_login(client, "admin@example.com", role="admin_staff")
    counselor, counselor_id = register_and_login(client, "carol@example.com")
    stranger, _ = register_and_login(client, "sam@example.com")

    student = client.post(
        "/api/students",
        json={"name": "S1", "email": "s1@example.com", "counselorId": counselor_id},
        headers=auth(admin),
    ).json()
    application = client.post(
        "/api/applications",
        json={"studentId": student["id"], "university": "Leeds", "program": "MSc Data"},
        headers=auth(admin),
    ).json()
    admission = client.post(
        "/api/admissions",
        json={
            "applicationId": application["id"],
            "studentId": student["id"],
            "university": "Leeds",
            "program": "MSc Data",
            "decision": "Offer",
        },
        headers=auth(admin),
    ).json()

    assert [a["id"] for a in client.get("/api/applications", headers=auth(counselor)).json()] == [application["id"]]
    assert [a["id"] for a in client.get("/api/admissions", headers=auth(counselor)).json()] == [admission["id"]]
    assert client.get("/api/applications", headers=auth(stranger)).json() == []
    assert client.get("/api/admissions", headers=auth(stranger)).json() == []
    assert client.get(f"/api/applications/{application['id']}", headers=auth(stranger)).status_code == 404
    assert client.get(f"/api/admissions/{admission['id']}", headers=auth(stranger)).status_code == 404
    assert client.get(f"/api/applications/student/{student['id']}", headers=auth(stranger)).status_code == 404
