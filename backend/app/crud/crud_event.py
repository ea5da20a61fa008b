"""CRUD operations for events and their registrations."""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.core.exceptions import ConflictError, NotFoundError
from backend.app.crud.crud_lead import lead_crud
from backend.app.models.event import Event, EventRegistration
from backend.app.models.lead import Lead
from backend.app.models.user import User
from backend.app.schemas.event import EventCreate, EventRegistrationCreate, EventUpdate
from backend.app.schemas.lead import LeadCreate

logger = logging.getLogger(__name__)

EVENT_LEAD_SOURCE = "Events"


class CRUDEvent:
    def get_multi(self, db: Session, *, upcoming_from: Optional[date] = None) -> List[Event]:
        query = db.query(Event)
        if upcoming_from is not None:
            return query.filter(Event.date >= upcoming_from).order_by(Event.date.asc(), Event.id.asc()).all()
        return query.order_by(Event.date.desc(), Event.id.desc()).all()

    def get(self, db: Session, event_id: int) -> Event:
        event = db.get(Event, event_id)
        if event is None:
            raise NotFoundError("Event not found")
        return event

    def create(self, db: Session, *, obj_in: EventCreate) -> Event:
        event = Event(**obj_in.model_dump())
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    def update(self, db: Session, event_id: int, *, obj_in: EventUpdate) -> Event:
        event = self.get(db, event_id)
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            if value is None and field in ("name", "date"):
                continue
            setattr(event, field, value)
        db.commit()
        db.refresh(event)
        return event

    def remove(self, db: Session, event_id: int) -> None:
        event = self.get(db, event_id)
        db.delete(event)
        db.commit()

    def get_registrations(self, db: Session, event_id: int) -> List[EventRegistration]:
        self.get(db, event_id)
        return (
            db.query(EventRegistration)
            .filter(EventRegistration.event_id == event_id)
            .order_by(EventRegistration.created_at.desc(), EventRegistration.id.desc())
            .all()
        )

    def create_registration(self, db: Session, event_id: int, *, obj_in: EventRegistrationCreate) -> EventRegistration:
        self.get(db, event_id)
        registration = EventRegistration(event_id=event_id, **obj_in.model_dump())
        db.add(registration)
        db.commit()
        db.refresh(registration)
        return registration

    def convert_registration_to_lead(
        self, db: Session, registration_id: int, *, actor: Optional[User] = None
    ) -> Lead:
        registration = db.get(EventRegistration, registration_id)
        if registration is None:
            raise NotFoundError("Registration not found")
        if registration.is_converted:
            raise ConflictError("Registration has already been converted to a lead")

        lead = lead_crud.create(
            db,
            obj_in=LeadCreate(
                name=registration.name,
                email=registration.email,
                phone=registration.phone,
                city=registration.city,
                source=EVENT_LEAD_SOURCE,
                status="new",
            ),
            actor=actor,
            commit=False,
        )
        registration.is_converted = True
        registration.status = "converted"
        registration.lead_id = lead.id
        db.commit()
        db.refresh(lead)
        logger.info("Event registration %s converted to lead %s", registration_id, lead.id)
        return lead


event_crud = CRUDEvent()
