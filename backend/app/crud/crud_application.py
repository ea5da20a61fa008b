"""CRUD operations for university applications.

Visibility follows the owning student's counselor/admission-officer assignment.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.core.exceptions import AccessDeniedError, NotFoundError
from backend.app.crud.base import apply_changes, writable_changes
from backend.app.crud.crud_student import student_crud
from backend.app.crud.scoping import can_see_student, scope_students
from backend.app.models.application import Application
from backend.app.models.student import Student
from backend.app.models.user import User
from backend.app.schemas.application import ApplicationCreate, ApplicationUpdate
from backend.app.services.activity_log import log_activity, log_field_changes, log_flagged_transition
from backend.app.services.status_flow import is_off_path, validate_transition

logger = logging.getLogger(__name__)


class CRUDApplication:
    def get_multi(
        self,
        db: Session,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> List[Application]:
        query = db.query(Application).join(Student, Application.student_id == Student.id)
        query = scope_students(query, user_id, user_role)
        return query.order_by(Application.created_at.desc(), Application.id.desc()).all()

    def get(
        self,
        db: Session,
        application_id: int,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Application:
        application = db.get(Application, application_id)
        if application is None:
            raise NotFoundError("Application not found")
        if not can_see_student(application.student, user_id, user_role):
            raise AccessDeniedError("Application not found", user_id=user_id, record_id=application_id)
        return application

    def get_by_student(
        self,
        db: Session,
        student_id: int,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> List[Application]:
        student_crud.get(db, student_id, user_id=user_id, user_role=user_role)
        return (
            db.query(Application)
            .filter(Application.student_id == student_id)
            .order_by(Application.created_at.desc(), Application.id.desc())
            .all()
        )

    def create(
        self,
        db: Session,
        *,
        obj_in: ApplicationCreate,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Application:
        student = student_crud.get(db, obj_in.student_id, user_id=user_id, user_role=user_role)
        application = Application(**obj_in.model_dump())
        db.add(application)
        db.flush()
        log_activity(
            db,
            "student",
            student.id,
            "application_created",
            "Application created",
            f"Application submitted to {application.university} for {application.program}",
            actor=actor,
        )
        log_activity(
            db,
            "application",
            application.id,
            "created",
            "Application submitted",
            f"Application for {student.name} to {application.university} ({application.program})",
            actor=actor,
        )
        db.commit()
        db.refresh(application)
        logger.info("Application %s created for student %s", application.id, student.id)
        return application

    def update(
        self,
        db: Session,
        application_id: int,
        *,
        obj_in: ApplicationUpdate,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Application:
        application = self.get(db, application_id, user_id=user_id, user_role=user_role)
        changes = writable_changes(Application, obj_in)
        flagged = False
        if "app_status" in changes:
            current, requested = application.app_status, changes["app_status"]
            if validate_transition("applications", "app_status", current, requested):
                flagged = is_off_path("applications", "app_status", current, requested)
        before = apply_changes(application, changes)
        log_field_changes(db, "application", application.id, before, changes, actor)
        if flagged:
            log_flagged_transition(
                db, "application", application.id, "app_status", before["app_status"], application.app_status, actor
            )
        db.commit()
        db.refresh(application)
        return application

    def remove(
        self,
        db: Session,
        application_id: int,
        *,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> bool:
        application = db.get(Application, application_id)
        if application is None:
            return False
        if not can_see_student(application.student, user_id, user_role):
            raise AccessDeniedError("Application not found", user_id=user_id, record_id=application_id)
        log_activity(
            db,
            "application",
            application.id,
            "deleted",
            "Application deleted",
            f"Application to {application.university} for {application.program} was deleted",
            actor=actor,
        )
        db.delete(application)
        db.commit()
        return True


application_crud = CRUDApplication()
