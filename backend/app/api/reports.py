"""Reports endpoint: grouped pipeline counts over a date range, branch or counselor."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.reports import ReportSummary
from backend.app.services.reports import get_report_summary

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary", response_model=ReportSummary)
async def report_summary(
    start: date | None = None,
    end: date | None = None,
    branch: str | None = None,
    counselor_id: int | None = Query(default=None, alias="counselorId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if start and end and start > end:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must be on or before end")
    return get_report_summary(
        db,
        start=start,
        end=end,
        branch=branch,
        counselor_id=counselor_id,
        user_id=current_user.id,
        user_role=current_user.role,
    )
