"""Dashboard endpoint: this month's pipeline counts for the current user."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.time import utc_today
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.reports import DashboardSummary
from backend.app.services.reports import get_dashboard_summary

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary)
async def dashboard_summary(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_dashboard_summary(db, today=utc_today(), user_id=current_user.id, user_role=current_user.role)
