"""Pipeline aggregation for the dashboard and the reports page.

Counts are taken over the same role-scoped collections the list endpoints
return, so a counselor's dashboard only ever reflects their own records.
"""

from collections import Counter
from datetime import date
from typing import Callable, Iterable, Optional

from sqlalchemy.orm import Session

from backend.app.core.time import month_bounds
from backend.app.crud.crud_admission import admission_crud
from backend.app.crud.crud_application import application_crud
from backend.app.crud.crud_event import event_crud
from backend.app.crud.crud_lead import lead_crud
from backend.app.crud.crud_student import student_crud
from backend.app.models.user import User

UNSPECIFIED = "Unspecified"
UPCOMING_EVENT_LIMIT = 5


def group_count(items: Iterable, key: Callable) -> dict:
    """Tally items by key(item); blank keys are counted under 'Unspecified'."""
    counts = Counter()
    for item in items:
        value = key(item)
        counts[str(value) if value not in (None, "") else UNSPECIFIED] += 1
    return dict(counts)


def _in_range(created_at, start: Optional[date], end: Optional[date]) -> bool:
    day = created_at.date()
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


def _counselor_label(lead, counselors: dict) -> Optional[str]:
    if lead.counselor_id is None:
        return None
    user = counselors.get(lead.counselor_id)
    return user.display_name if user else str(lead.counselor_id)


def _breakdown(db: Session, leads, students, applications, admissions) -> dict:
    counselor_ids = {lead.counselor_id for lead in leads if lead.counselor_id is not None}
    counselors = {}
    if counselor_ids:
        counselors = {user.id: user for user in db.query(User).filter(User.id.in_(counselor_ids)).all()}
    return {
        "totals": {
            "leads": len(leads),
            "students": len(students),
            "applications": len(applications),
            "admissions": len(admissions),
        },
        "leads_by_status": group_count(leads, lambda lead: lead.status),
        "leads_by_source": group_count(leads, lambda lead: lead.source),
        "leads_by_counselor": group_count(leads, lambda lead: _counselor_label(lead, counselors)),
        "students_by_status": group_count(students, lambda student: student.status),
        "applications_by_status": group_count(applications, lambda app: app.app_status),
        "applications_by_country": group_count(applications, lambda app: app.country),
        "admissions_by_visa_status": group_count(admissions, lambda admission: admission.visa_status),
    }


def _scoped_collections(db: Session, user_id: Optional[int], user_role: Optional[str]):
    scope = {"user_id": user_id, "user_role": user_role}
    return (
        lead_crud.get_multi(db, **scope),
        student_crud.get_multi(db, **scope),
        application_crud.get_multi(db, **scope),
        admission_crud.get_multi(db, **scope),
    )


def get_dashboard_summary(
    db: Session,
    *,
    today: date,
    user_id: Optional[int] = None,
    user_role: Optional[str] = None,
) -> dict:
    start, end = month_bounds(today)
    leads, students, applications, admissions = _scoped_collections(db, user_id, user_role)

    def this_month(rows):
        return [row for row in rows if _in_range(row.created_at, start, end)]

    summary = _breakdown(db, this_month(leads), this_month(students), this_month(applications), this_month(admissions))
    summary.update(
        period_start=start,
        period_end=end,
        upcoming_events=event_crud.get_multi(db, upcoming_from=today)[:UPCOMING_EVENT_LIMIT],
    )
    return summary


def get_report_summary(
    db: Session,
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
    branch: Optional[str] = None,
    counselor_id: Optional[int] = None,
    user_id: Optional[int] = None,
    user_role: Optional[str] = None,
) -> dict:
    leads, students, applications, admissions = _scoped_collections(db, user_id, user_role)

    def keep(row, owner) -> bool:
        if not _in_range(row.created_at, start, end):
            return False
        if branch and owner.branch != branch:
            return False
        if counselor_id is not None and owner.counselor_id != counselor_id:
            return False
        return True

    summary = _breakdown(
        db,
        [lead for lead in leads if keep(lead, lead)],
        [student for student in students if keep(student, student)],
        [app for app in applications if keep(app, app.student)],
        [admission for admission in admissions if keep(admission, admission.student)],
    )
    summary.update(start=start, end=end, branch=branch, counselor_id=counselor_id)
    return summary
