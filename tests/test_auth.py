import pytest
from fastapi.testclient import TestClient

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


def register_user(client: TestClient, email: str, password: str = "secret123", **extra):
    return client.post("/api/auth/register", json={"email": email, "password": password, **extra})


def test_successful_registration_returns_user():
    client = TestClient(app)
    response = register_user(client, "user@example.com", firstName="Ada", lastName="Lovelace")
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "user@example.com"
    assert data["firstName"] == "Ada"
    assert data["role"] == "counselor"
    assert "password" not in data
    assert "hashedPassword" not in data
    assert isinstance(data.get("id"), int)


def test_registration_with_role():
    client = TestClient(app)
    response = register_user(client, "manager@example.com", role="branch_manager")
    assert response.status_code == 201
    assert response.json()["role"] == "branch_manager"


def login_token(client: TestClient, email: str, password: str = "secret123") -> str:
    return client.post("/api/auth/login", json={"email": email, "password": password}).json()["accessToken"]


def test_self_registration_cannot_claim_elevated_role_once_staff_exist():
    client = TestClient(app)
    assert register_user(client, "first@example.com").status_code == 201

    response = register_user(client, "sneaky@example.com", role="admin_staff")
    assert response.status_code == 403
    assert response.json() == {"message": "Admin access required to assign this role"}
    with SessionLocal() as db:
        assert db.query(User).filter(User.email == "sneaky@example.com").first() is None


def test_counselor_cannot_grant_elevated_role():
    client = TestClient(app)
    register_user(client, "casey@example.com")
    token = login_token(client, "casey@example.com")
    response = client.post(
        "/api/auth/register",
        json={"email": "officer@example.com", "password": "secret123", "role": "admission_officer"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 403


def test_admin_can_grant_elevated_roles():
    client = TestClient(app)
    register_user(client, "root@example.com", role="admin_staff")
    token = login_token(client, "root@example.com")
    headers = {"Authorization": f"Bearer {token}"}

    response = client.post(
        "/api/auth/register",
        json={"email": "officer@example.com", "password": "secret123", "role": "admission_officer"},
        headers=headers,
    )
    assert response.status_code == 201
    assert response.json()["role"] == "admission_officer"


def test_branch_manager_cannot_grant_admin_staff():
    client = TestClient(app)
    register_user(client, "manager@example.com", role="branch_manager")
    token = login_token(client, "manager@example.com")
    headers = {"Authorization": f"Bearer {token}"}

    denied = client.post(
        "/api/auth/register",
        json={"email": "boss@example.com", "password": "secret123", "role": "admin_staff"},
        headers=headers,
    )
    allowed = client.post(
        "/api/auth/register",
        json={"email": "officer@example.com", "password": "secret123", "role": "admission_officer"},
        headers=headers,
    )
    assert denied.status_code == 403
    assert allowed.status_code == 201


def test_registration_with_invalid_token_returns_401():
    client = TestClient(app)
    response = client.post(
        "/api/auth/register",
        json={"email": "x@example.com", "password": "secret123"},
        headers={"Authorization": "Bearer invalid"},
    )
    assert response.status_code == 401


def test_registration_rejects_unknown_role():
    client = TestClient(app)
    response = register_user(client, "bad@example.com", role="superuser")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid data"


def test_duplicate_email_returns_400():
    client = TestClient(app)
    assert register_user(client, "dup@example.com").status_code == 201
    second = register_user(client, "dup@example.com")
    assert second.status_code == 400
    assert second.json() == {"message": "Email already registered"}


def test_short_password_rejected():
    client = TestClient(app)
    response = register_user(client, "short@example.com", password="abc")
    assert response.status_code == 400
    assert any(error["field"] == "password" for error in response.json()["errors"])


def test_user_persisted_with_hashed_password():
    client = TestClient(app)
    register_user(client, "persist@example.com")
    with SessionLocal() as db:
        user = db.query(User).filter(User.email == "persist@example.com").first()
        assert user is not None
        assert user.hashed_password and user.hashed_password != "secret123"


def test_successful_login_returns_user_and_token():
    client = TestClient(app)
    register_user(client, "login@example.com")
    response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "secret123"})
    assert response.status_code == 200
    data = response.json()
    assert data["tokenType"] == "bearer"
    assert isinstance(data["accessToken"], str) and data["accessToken"]
    assert data["user"]["email"] == "login@example.com"
    assert "hashedPassword" not in data["user"]


def test_wrong_password_returns_401_with_generic_message():
    client = TestClient(app)
    register_user(client, "wrongpw@example.com")
    response = client.post("/api/auth/login", json={"email": "wrongpw@example.com", "password": "not-it-at-all"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}


def test_unknown_email_gets_same_response_as_wrong_password():
    client = TestClient(app)
    response = client.post("/api/auth/login", json={"email": "nosuch@example.com", "password": "secret123"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}


def test_missing_hash_returns_401_not_500():
    client = TestClient(app)
    register_user(client, "badhash@example.com")
    with SessionLocal() as db:
        user = db.query(User).filter(User.email == "badhash@example.com").first()
        user.hashed_password = None
        db.commit()
    response = client.post("/api/auth/login", json={"email": "badhash@example.com", "password": "secret123"})
    assert response.status_code == 401


def test_inactive_user_cannot_login():
    client = TestClient(app)
    register_user(client, "inactive@example.com")
    with SessionLocal() as db:
        user = db.query(User).filter(User.email == "inactive@example.com").first()
        user.is_active = False
        db.commit()
    response = client.post("/api/auth/login", json={"email": "inactive@example.com", "password": "secret123"})
    assert response.status_code == 401


def test_me_returns_current_user():
    client = TestClient(app)
    register_user(client, "me@example.com", role="admin_staff")
    token = client.post("/api/auth/login", json={"email": "me@example.com", "password": "secret123"}).json()["accessToken"]
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["email"] == "me@example.com"
    assert response.json()["role"] == "admin_staff"


def test_me_without_token_returns_401():
    client = TestClient(app)
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}


def test_me_with_invalid_token_returns_401():
    client = TestClient(app)
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer invalid"})
    assert response.status_code == 401


def test_users_list_filters_by_role():
    client = TestClient(app)
    register_user(client, "boss@example.com", role="admin_staff")
    register_user(client, "c1@example.com")
    token = client.post("/api/auth/login", json={"email": "boss@example.com", "password": "secret123"}).json()["accessToken"]
    headers = {"Authorization": f"Bearer {token}"}

    everyone = client.get("/api/users", headers=headers)
    counselors = client.get("/api/users", params={"role": "counselor"}, headers=headers)
    assert everyone.status_code == 200
    assert len(everyone.json()) == 2
    assert [user["email"] for user in counselors.json()] == ["c1@example.com"]

    user_id = counselors.json()[0]["id"]
    assert client.get(f"/api/users/{user_id}", headers=headers).json()["email"] == "c1@example.com"
    assert client.get("/api/users/9999", headers=headers).status_code == 404
