"""Global search across leads and students."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_lead import lead_crud
from backend.app.crud.crud_student import student_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.lead import LeadRead
from backend.app.schemas.student import StudentRead

router = APIRouter(prefix="/search", tags=["search"])


def _require_query(q: str | None) -> str:
    if not q or not q.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search query is required")
    return q


@router.get("/leads", response_model=list[LeadRead])
async def search_leads(
    q: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return lead_crud.search(db, _require_query(q), user_id=current_user.id, user_role=current_user.role)


@router.get("/students", response_model=list[StudentRead])
async def search_students(
    q: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return student_crud.search(db, _require_query(q), user_id=current_user.id, user_role=current_user.role)
