"""Resolve the CRM record an activity or follow-up is attached to, with the caller's scope."""

from typing import Optional

from sqlalchemy.orm import Session

from backend.app.core.exceptions import ServiceError
from backend.app.crud.crud_admission import admission_crud
from backend.app.crud.crud_application import application_crud
from backend.app.crud.crud_lead import lead_crud
from backend.app.crud.crud_student import student_crud

ENTITY_CRUDS = {
    "lead": lead_crud,
    "student": student_crud,
    "application": application_crud,
    "admission": admission_crud,
}


class UnknownEntityTypeError(ServiceError):
    def __init__(self, entity_type: str) -> None:
        super().__init__(f"Unknown entity type '{entity_type}'", 400)


def resolve_entity(
    db: Session,
    entity_type: str,
    entity_id: int,
    *,
    user_id: Optional[int] = None,
    user_role: Optional[str] = None,
):
    """Return the record, raising NotFoundError/AccessDeniedError like the entity's own crud."""
    crud = ENTITY_CRUDS.get(entity_type)
    if crud is None:
        raise UnknownEntityTypeError(entity_type)
    return crud.get(db, entity_id, user_id=user_id, user_role=user_role)
