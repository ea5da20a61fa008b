"""CRUD operations for admission outcomes."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.core.exceptions import AccessDeniedError, ConflictError, NotFoundError
from backend.app.crud.base import apply_changes, writable_changes
from backend.app.crud.crud_application import application_crud
from backend.app.crud.crud_student import student_crud
from backend.app.crud.scoping import can_see_student, scope_students
from backend.app.models.admission import Admission
from backend.app.models.student import Student
from backend.app.models.user import User
from backend.app.schemas.admission import AdmissionCreate, AdmissionUpdate
from backend.app.services.activity_log import log_activity, log_field_changes, log_flagged_transition
from backend.app.services.status_flow import is_off_path, validate_transition

logger = logging.getLogger(__name__)


class CRUDAdmission:
    def get_multi(
        self,
        db: Session,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> List[Admission]:
        query = db.query(Admission).join(Student, Admission.student_id == Student.id)
        query = scope_students(query, user_id, user_role)
        return query.order_by(Admission.created_at.desc(), Admission.id.desc()).all()

    def get(
        self,
        db: Session,
        admission_id: int,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Admission:
        admission = db.get(Admission, admission_id)
        if admission is None:
            raise NotFoundError("Admission not found")
        if not can_see_student(admission.student, user_id, user_role):
            raise AccessDeniedError("Admission not found", user_id=user_id, record_id=admission_id)
        return admission

    def get_by_student(
        self,
        db: Session,
        student_id: int,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> List[Admission]:
        student_crud.get(db, student_id, user_id=user_id, user_role=user_role)
        return (
            db.query(Admission)
            .filter(Admission.student_id == student_id)
            .order_by(Admission.created_at.desc(), Admission.id.desc())
            .all()
        )

    def create(
        self,
        db: Session,
        *,
        obj_in: AdmissionCreate,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Admission:
        student = student_crud.get(db, obj_in.student_id, user_id=user_id, user_role=user_role)
        application = application_crud.get(db, obj_in.application_id, user_id=user_id, user_role=user_role)
        if application.student_id != student.id:
            raise ConflictError("Application does not belong to this student")

        admission = Admission(**obj_in.model_dump())
        db.add(admission)
        db.flush()
        log_activity(
            db,
            "student",
            student.id,
            "admission_created",
            "Admission decision received",
            f"{admission.decision} decision received from {admission.university} for {admission.program}",
            actor=actor,
        )
        log_activity(
            db,
            "admission",
            admission.id,
            "created",
            "Admission decision recorded",
            f"{admission.decision} decision for {student.name} at {admission.university}",
            actor=actor,
        )
        db.commit()
        db.refresh(admission)
        logger.info("Admission %s recorded for application %s", admission.id, application.id)
        return admission

    def update(
        self,
        db: Session,
        admission_id: int,
        *,
        obj_in: AdmissionUpdate,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Admission:
        admission = self.get(db, admission_id, user_id=user_id, user_role=user_role)
        changes = writable_changes(Admission, obj_in)
        flagged = False
        if "visa_status" in changes:
            current, requested = admission.visa_status, changes["visa_status"]
            if validate_transition("admissions", "visa_status", current, requested):
                flagged = is_off_path("admissions", "visa_status", current, requested)
        before = apply_changes(admission, changes)
        log_field_changes(db, "admission", admission.id, before, changes, actor)
        if flagged:
            log_flagged_transition(
                db, "admission", admission.id, "visa_status", before["visa_status"], admission.visa_status, actor
            )
        db.commit()
        db.refresh(admission)
        return admission

    def remove(
        self,
        db: Session,
        admission_id: int,
        *,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> bool:
        admission = db.get(Admission, admission_id)
        if admission is None:
            return False
        if not can_see_student(admission.student, user_id, user_role):
            raise AccessDeniedError("Admission not found", user_id=user_id, record_id=admission_id)
        log_activity(
            db,
            "admission",
            admission.id,
            "deleted",
            "Admission deleted",
            f"Admission record for {admission.university} was deleted",
            actor=actor,
        )
        db.delete(admission)
        db.commit()
        return True


admission_crud = CRUDAdmission()
