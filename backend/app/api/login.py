"""Login endpoint for Pathway CRM staff."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.exceptions import AuthenticationError
from backend.app.core.security import create_access_token
from backend.app.crud.crud_user import user_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.login import LoginRequest, LoginResponse
from backend.app.schemas.user import UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = user_crud.authenticate(db, credentials.email, credentials.password)
    if user is None:
        logger.info("Failed login attempt for %s", credentials.email)
        raise AuthenticationError()

    token = create_access_token(user_id=user.id, extra_claims={"role": user.role})
    return {"user": user, "access_token": token, "token_type": "bearer"}


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
