"""Event and event registration schemas."""

import datetime as dt
from typing import Optional

from pydantic import EmailStr

from backend.app.schemas.common import CamelModel, ORMModel


class EventCreate(CamelModel):
    name: str
    type: Optional[str] = None
    date: dt.date
    venue: Optional[str] = None
    time: Optional[str] = None


class EventUpdate(CamelModel):
    name: Optional[str] = None
    type: Optional[str] = None
    date: Optional[dt.date] = None
    venue: Optional[str] = None
    time: Optional[str] = None


class EventRead(ORMModel):
    id: int
    name: str
    type: Optional[str] = None
    date: dt.date
    venue: Optional[str] = None
    time: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime


class EventRegistrationCreate(CamelModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    city: Optional[str] = None
    source: Optional[str] = None


class EventRegistrationRead(ORMModel):
    id: int
    event_id: int
    name: str
    email: str
    phone: Optional[str] = None
    city: Optional[str] = None
    source: Optional[str] = None
    status: str
    is_converted: bool
    lead_id: Optional[int] = None
    created_at: dt.datetime
