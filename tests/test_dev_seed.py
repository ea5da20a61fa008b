import pytest
from fastapi.testclient import TestClient

from backend.app.core.dev_seed import (
    DEFAULT_DEV_PASSWORD,
    DEFAULT_DEV_USERS,
    ensure_default_dev_users,
    ensure_default_dropdowns,
)
from backend.app.crud.crud_dropdown import dropdown_crud
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.dropdown import Dropdown
from backend.app.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def test_seeding_is_skipped_under_pytest():
    with SessionLocal() as db:
        ensure_default_dev_users(db)
        ensure_default_dropdowns(db)
        assert db.query(User).count() == 0
        assert db.query(Dropdown).count() == 0


def test_seeding_is_idempotent(monkeypatch):
    monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
    with SessionLocal() as db:
        ensure_default_dev_users(db)
        ensure_default_dropdowns(db)
        ensure_default_dev_users(db)
        ensure_default_dropdowns(db)

        assert db.query(User).count() == len(DEFAULT_DEV_USERS)
        steps = dropdown_crud.get_steps(db, "leads", "status")
        assert [step["key"] for step in steps] == ["new", "first_touch", "interested", "meeting", "follow_up", "lost"]
        assert steps[1]["label"] == "First Touch"


def test_seeded_accounts_can_log_in(monkeypatch):
    monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
    with SessionLocal() as db:
        ensure_default_dev_users(db)

    client = TestClient(app)
    for email, role, _, _ in DEFAULT_DEV_USERS:
        response = client.post("/api/auth/login", json={"email": email, "password": DEFAULT_DEV_PASSWORD})
        assert response.status_code == 200, response.json()
        token = response.json()["accessToken"]
        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["email"] == email
        assert me.json()["role"] == role
