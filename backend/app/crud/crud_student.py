"""CRUD operations for students, including conversion from a lead."""

import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from backend.app.core.exceptions import AccessDeniedError, ConflictError, NotFoundError
from backend.app.crud.base import apply_changes, writable_changes
from backend.app.crud.crud_lead import lead_crud
from backend.app.crud.scoping import STUDENT_SCOPE_COLUMNS, can_see_student, claim_for_creator, scope_students
from backend.app.models.student import Student
from backend.app.models.user import User
from backend.app.schemas.student import StudentConvertFromLead, StudentCreate, StudentUpdate
from backend.app.services.activity_log import log_activity, log_field_changes, transfer_activities

logger = logging.getLogger(__name__)

# student column -> lead attribute used when the conversion payload leaves it out
LEAD_FIELD_DEFAULTS = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "target_country": "country",
    "target_program": "program",
    "expectation": "expectation",
    "english_proficiency": "elt",
    "counselor_id": "counselor_id",
    "branch": "branch",
    "region": "region",
}


class CRUDStudent:
    def get_multi(
        self,
        db: Session,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> List[Student]:
        query = scope_students(db.query(Student), user_id, user_role)
        return query.order_by(Student.created_at.desc(), Student.id.desc()).all()

    def get(
        self,
        db: Session,
        student_id: int,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Student:
        student = db.get(Student, student_id)
        if student is None:
            raise NotFoundError("Student not found")
        if not can_see_student(student, user_id, user_role):
            raise AccessDeniedError("Student not found", user_id=user_id, record_id=student_id)
        return student

    def create(
        self,
        db: Session,
        *,
        obj_in: StudentCreate,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Student:
        data = claim_for_creator(obj_in.model_dump(), actor, STUDENT_SCOPE_COLUMNS)
        if data.get("lead_id") is not None:
            lead = lead_crud.get(db, data["lead_id"], user_id=user_id, user_role=user_role)
            if lead.student is not None:
                raise ConflictError("Lead has already been converted to a student")
        student = Student(**data)
        db.add(student)
        db.flush()
        log_activity(
            db,
            "student",
            student.id,
            "created",
            "Student record created",
            f"Student {student.name} was added to the system",
            actor=actor,
        )
        db.commit()
        db.refresh(student)
        logger.info("Student %s created by user %s", student.id, actor.id if actor else None)
        return student

    def convert_from_lead(
        self,
        db: Session,
        *,
        obj_in: StudentConvertFromLead,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Student:
        """Create the student for a lead and carry the lead's activity history over.

        The lead row and its own activities are left in place; once linked it
        drops out of lead listings.
        """
        lead = lead_crud.get(db, obj_in.lead_id, user_id=user_id, user_role=user_role)
        if lead.student is not None:
            raise ConflictError("Lead has already been converted to a student")

        data = {
            field: value
            for field, value in obj_in.model_dump(exclude_unset=True, exclude={"lead_id"}).items()
            if value is not None
        }
        for field, lead_attr in LEAD_FIELD_DEFAULTS.items():
            if field not in data and getattr(lead, lead_attr) is not None:
                data[field] = getattr(lead, lead_attr)
        claim_for_creator(data, actor, STUDENT_SCOPE_COLUMNS)

        student = Student(lead_id=lead.id, **data)
        db.add(student)
        db.flush()
        transfer_activities(db, "lead", lead.id, "student", student.id, actor=actor)
        db.commit()
        db.refresh(student)
        logger.info("Lead %s converted to student %s", lead.id, student.id)
        return student

    def update(
        self,
        db: Session,
        student_id: int,
        *,
        obj_in: StudentUpdate,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Student:
        student = self.get(db, student_id, user_id=user_id, user_role=user_role)
        changes = writable_changes(Student, obj_in)
        before = apply_changes(student, changes)
        log_field_changes(db, "student", student.id, before, changes, actor)
        db.commit()
        db.refresh(student)
        return student

    def remove(
        self,
        db: Session,
        student_id: int,
        *,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> bool:
        student = db.get(Student, student_id)
        if student is None:
            return False
        if not can_see_student(student, user_id, user_role):
            raise AccessDeniedError("Student not found", user_id=user_id, record_id=student_id)
        log_activity(
            db, "student", student.id, "deleted", "Student deleted", f"Student {student.name} was deleted", actor=actor
        )
        db.delete(student)
        db.commit()
        logger.info("Student %s deleted by user %s", student_id, actor.id if actor else None)
        return True

    def search(
        self,
        db: Session,
        query: str,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> List[Student]:
        pattern = f"%{query.strip()}%"
        rows = db.query(Student).filter(
            or_(
                Student.name.ilike(pattern),
                Student.email.ilike(pattern),
                Student.target_program.ilike(pattern),
                Student.target_country.ilike(pattern),
            )
        )
        return scope_students(rows, user_id, user_role).order_by(Student.created_at.desc(), Student.id.desc()).all()


student_crud = CRUDStudent()
