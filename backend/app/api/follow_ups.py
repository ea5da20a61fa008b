"""Follow-up calendar: the caller's scheduled follow-ups over a date window."""

from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from backend.app.core.time import to_naive_utc
from backend.app.crud.crud_follow_up import follow_up_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.follow_up import FollowUpCreate, FollowUpList, FollowUpRead

router = APIRouter(prefix="/follow-ups", tags=["follow-ups"])

MAX_RANGE = timedelta(days=366)


def split_entity_types(values: list[str] | None) -> list[str]:
    """Accept both repeated ?entityType= params and comma-separated lists."""
    return [part.strip() for value in values or [] for part in value.split(",") if part.strip()]


@router.get("", response_model=FollowUpList)
async def list_follow_ups(
    start: datetime,
    end: datetime,
    entity_type: list[str] | None = Query(default=None, alias="entityType"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    start, end = to_naive_utc(start), to_naive_utc(end)
    if start > end:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Start date must be before end date")
    if end - start > MAX_RANGE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Date range exceeds maximum allowed window"
        )
    rows = follow_up_crud.get_multi_for_user(
        db, user_id=current_user.id, start=start, end=end, entity_types=split_entity_types(entity_type)
    )
    return {"data": rows, "meta": {"start": start, "end": end, "total": len(rows)}}


@router.post("", response_model=FollowUpRead, status_code=status.HTTP_201_CREATED)
async def create_follow_up(
    follow_up_in: FollowUpCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return follow_up_crud.create(db, obj_in=follow_up_in, actor=current_user)
