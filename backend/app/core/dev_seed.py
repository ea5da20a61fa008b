import logging
import os

from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.dropdown import Dropdown
from backend.app.models.user import ADMIN_STAFF, COUNSELOR, User
from backend.app.services import status_flow

logger = logging.getLogger(__name__)

DEFAULT_DEV_PASSWORD = "Secret123!"
DEFAULT_DEV_USERS = [
    ("admin@pathway-crm.com", ADMIN_STAFF, "Admin", "Staff"),
    ("counselor@pathway-crm.com", COUNSELOR, "Casey", "Counselor"),
]

DEFAULT_STATUS_DROPDOWNS = [
    ("leads", "status", status_flow.LEAD_STATUSES, status_flow.LEAD_STATUS_LABELS),
    ("applications", "app_status", status_flow.APP_STATUSES, {}),
    ("applications", "case_status", ("Raw", "Processing", "Offered", "Deposited", "Closed"), {}),
    ("admissions", "visa_status", status_flow.VISA_STATUSES, {}),
]


def _skip_seeding() -> bool:
    return bool(os.getenv("PYTEST_CURRENT_TEST"))


def ensure_default_dev_users(db: Session) -> None:
    """
    Create default staff accounts for local development if they do not exist.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if _skip_seeding():
        return

    created = False
    for email, role, first_name, last_name in DEFAULT_DEV_USERS:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            continue

        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
            hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD),
            is_active=True,
        )
        db.add(user)
        created = True

    if created:
        db.commit()
        logger.info("Seeded development users")


def ensure_default_dropdowns(db: Session) -> None:
    """Seed status dropdown rows in state order for any field that has none."""
    if _skip_seeding():
        return

    created = False
    for module, field, keys, labels in DEFAULT_STATUS_DROPDOWNS:
        has_rows = db.query(Dropdown).filter(Dropdown.module_name == module, Dropdown.field_name == field).first()
        if has_rows:
            continue
        for sequence, key in enumerate(keys):
            db.add(
                Dropdown(
                    module_name=module,
                    field_name=field,
                    key=key,
                    value=labels.get(key, key),
                    sequence=sequence,
                    is_default=sequence == 0,
                )
            )
        created = True

    if created:
        db.commit()
        logger.info("Seeded default dropdowns")
