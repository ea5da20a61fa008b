"""Authentication dependencies for retrieving the current user.

Every request resolves its own user from the bearer token; routes pass that
user's id and role down into the crud layer explicitly.
"""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.security import decode_access_token
from backend.app.db.session import get_db
from backend.app.models.user import User


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(db: Session = Depends(get_db), authorization: str | None = Header(default=None)) -> User:
    # Expect Authorization: Bearer <token>
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized()
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_access_token(token)
    except ValueError:
        raise _unauthorized()

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _unauthorized()

    user = db.get(User, user_id)
    if not user or not user.is_active:
        raise _unauthorized()
    return user


def get_optional_user(
    db: Session = Depends(get_db), authorization: str | None = Header(default=None)
) -> User | None:
    """Resolve the caller when a bearer token is sent; anonymous requests get None."""
    if not authorization:
        return None
    return get_current_user(db=db, authorization=authorization)
