"""Role-based row visibility.

Counselors see the leads and students assigned to them; admission officers
see the students assigned to them. Applications and admissions follow their
student. Every other role sees everything.
"""

from typing import Optional

from sqlalchemy.orm import Query

from backend.app.models.lead import Lead
from backend.app.models.student import Student
from backend.app.models.user import ADMISSION_OFFICER, COUNSELOR, User

LEAD_SCOPE_COLUMNS = {COUNSELOR: "counselor_id"}
STUDENT_SCOPE_COLUMNS = {
    COUNSELOR: "counselor_id",
    ADMISSION_OFFICER: "admission_officer_id",
}


def scope_leads(query: Query, user_id: Optional[int], user_role: Optional[str]) -> Query:
    if user_role == COUNSELOR and user_id is not None:
        return query.filter(Lead.counselor_id == user_id)
    return query


def can_see_lead(lead: Lead, user_id: Optional[int], user_role: Optional[str]) -> bool:
    if user_role == COUNSELOR and user_id is not None:
        return lead.counselor_id == user_id
    return True


def scope_students(query: Query, user_id: Optional[int], user_role: Optional[str]) -> Query:
    """Filter a query that selects from (or joins) students."""
    column = STUDENT_SCOPE_COLUMNS.get(user_role)
    if column is None or user_id is None:
        return query
    return query.filter(getattr(Student, column) == user_id)


def can_see_student(student: Student, user_id: Optional[int], user_role: Optional[str]) -> bool:
    column = STUDENT_SCOPE_COLUMNS.get(user_role)
    if column is None or user_id is None:
        return True
    return getattr(student, column) == user_id


def claim_for_creator(data: dict, actor: Optional[User], scope_columns: dict) -> dict:
    """Assign a new row to its creator when the creator's role is scoped and the column is empty."""
    column = scope_columns.get(actor.role) if actor is not None else None
    if column is not None and data.get(column) is None:
        data[column] = actor.id
    return data
