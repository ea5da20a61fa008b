"""Recruitment event endpoints and registration-to-lead conversion."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_event import event_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.event import (
    EventCreate,
    EventRead,
    EventRegistrationCreate,
    EventRegistrationRead,
    EventUpdate,
)
from backend.app.schemas.lead import LeadRead

router = APIRouter(tags=["events"])


@router.get("/events", response_model=list[EventRead])
async def list_events(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return event_crud.get_multi(db)


@router.post("/events", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(event_in: EventCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return event_crud.create(db, obj_in=event_in)


@router.get("/events/{event_id}", response_model=EventRead)
async def get_event(event_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return event_crud.get(db, event_id)


@router.put("/events/{event_id}", response_model=EventRead)
async def update_event(
    event_id: int,
    event_in: EventUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return event_crud.update(db, event_id, obj_in=event_in)


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    event_crud.remove(db, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/events/{event_id}/registrations", response_model=list[EventRegistrationRead])
async def list_registrations(event_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return event_crud.get_registrations(db, event_id)


@router.post(
    "/events/{event_id}/registrations",
    response_model=EventRegistrationRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_registration(
    event_id: int,
    registration_in: EventRegistrationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return event_crud.create_registration(db, event_id, obj_in=registration_in)


@router.post(
    "/event-registrations/{registration_id}/convert-to-lead",
    response_model=LeadRead,
    status_code=status.HTTP_201_CREATED,
)
async def convert_registration_to_lead(
    registration_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return event_crud.convert_registration_to_lead(db, registration_id, actor=current_user)
