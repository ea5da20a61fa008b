"""Handles staff registration for Pathway CRM.

Anyone may sign up as a counselor. Other roles are granted by an
authenticated admin or branch manager, except for the very first account,
which bootstraps the installation.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_user import user_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_optional_user
from backend.app.models.user import ADMIN_STAFF, ADMISSION_OFFICER, BRANCH_MANAGER, COUNSELOR, USER_ROLES, User
from backend.app.schemas.user import UserCreate, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

# caller role -> roles it may hand out
ROLE_GRANTS = {
    ADMIN_STAFF: set(USER_ROLES),
    BRANCH_MANAGER: {COUNSELOR, ADMISSION_OFFICER, BRANCH_MANAGER},
}


def can_grant_role(db: Session, current_user: User | None, role: str) -> bool:
    if role == COUNSELOR:
        return True
    if current_user is None:
        return not user_crud.has_users(db)
    return role in ROLE_GRANTS.get(current_user.role, set())


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    if not can_grant_role(db, current_user, user_in.role):
        logger.info(
            "Refused %s registration for %s by user %s",
            user_in.role,
            user_in.email,
            current_user.id if current_user else None,
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required to assign this role")
    return user_crud.create(db, obj_in=user_in)
