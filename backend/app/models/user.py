from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, func

from backend.app.db.base_class import Base

COUNSELOR = "counselor"
ADMISSION_OFFICER = "admission_officer"
BRANCH_MANAGER = "branch_manager"
ADMIN_STAFF = "admin_staff"

USER_ROLES = (COUNSELOR, ADMISSION_OFFICER, BRANCH_MANAGER, ADMIN_STAFF)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_image_url = Column(String(512), nullable=True)
    role = Column(String(50), nullable=False, default=COUNSELOR)
    branch_id = Column(String(100), nullable=True)
    department = Column(String(100), nullable=True)
    phone_number = Column(String(50), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    hashed_password = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def display_name(self) -> str:
        full_name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full_name or self.email or "User"
