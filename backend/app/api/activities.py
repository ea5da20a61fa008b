"""Activity trail endpoints for leads, students, applications and admissions.

The parent record is resolved with the caller's scope first, so a trail is
only readable or writable by someone who can see the record itself. A
`follow_up` activity also schedules a follow-up on the caller's calendar.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_follow_up import follow_up_crud
from backend.app.crud.entities import resolve_entity
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.activity import FOLLOW_UP_ACTIVITY, ActivityCreate, ActivityRead
from backend.app.schemas.follow_up import FollowUpCreate
from backend.app.services.activity_log import list_activities, log_activity

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("/{entity_type}/{entity_id}", response_model=list[ActivityRead])
async def get_activities(
    entity_type: str,
    entity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    resolve_entity(db, entity_type, entity_id, user_id=current_user.id, user_role=current_user.role)
    return list_activities(db, entity_type, entity_id)


@router.post("", response_model=ActivityRead, status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity_in: ActivityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    resolve_entity(
        db, activity_in.entity_type, activity_in.entity_id, user_id=current_user.id, user_role=current_user.role
    )
    activity = log_activity(
        db,
        activity_in.entity_type,
        activity_in.entity_id,
        activity_in.activity_type,
        activity_in.title,
        activity_in.description,
        actor=current_user,
    )
    if activity_in.activity_type == FOLLOW_UP_ACTIVITY:
        follow_up_crud.create(
            db,
            obj_in=FollowUpCreate(
                entity_type=activity_in.entity_type,
                entity_id=activity_in.entity_id,
                comments=activity_in.description or activity_in.title,
                follow_up_on=activity_in.follow_up_at,
            ),
            actor=current_user,
            commit=False,
        )
    db.commit()
    db.refresh(activity)
    return activity
