"""CRUD operations for staff accounts."""

from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.core.exceptions import ConflictError, NotFoundError
from backend.app.core.security import get_password_hash, verify_password
from backend.app.models.user import User
from backend.app.schemas.user import UserCreate


class CRUDUser:
    def get(self, db: Session, user_id: int) -> User:
        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email.lower()).first()

    def has_users(self, db: Session) -> bool:
        return db.query(User.id).first() is not None

    def get_multi(self, db: Session, *, role: Optional[str] = None) -> List[User]:
        query = db.query(User)
        if role:
            query = query.filter(User.role == role)
        return query.order_by(User.id.asc()).all()

    def create(self, db: Session, *, obj_in: UserCreate) -> User:
        if self.get_by_email(db, obj_in.email):
            raise ConflictError("Email already registered")
        data = obj_in.model_dump(exclude={"password"})
        data["email"] = data["email"].lower()
        user = User(**data, hashed_password=get_password_hash(obj_in.password), is_active=True)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    def authenticate(self, db: Session, email: str, password: str) -> Optional[User]:
        """Return the user for valid credentials, otherwise None without saying why."""
        user = self.get_by_email(db, email)
        if user is None or not user.hashed_password or not user.is_active:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user


user_crud = CRUDUser()
