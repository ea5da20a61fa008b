"""CRUD operations for leads."""

import logging
from typing import List, Optional

from sqlalchemy import exists, or_
from sqlalchemy.orm import Session

from backend.app.core.exceptions import AccessDeniedError, NotFoundError
from backend.app.crud.base import apply_changes, writable_changes
from backend.app.crud.scoping import LEAD_SCOPE_COLUMNS, can_see_lead, claim_for_creator, scope_leads
from backend.app.models.lead import Lead
from backend.app.models.student import Student
from backend.app.models.user import User
from backend.app.schemas.lead import LeadCreate, LeadUpdate
from backend.app.services.activity_log import log_activity, log_field_changes, log_flagged_transition
from backend.app.services.status_flow import LEAD_LOST_STATUS, is_off_path, validate_transition

logger = logging.getLogger(__name__)


class CRUDLead:
    def get_multi(
        self,
        db: Session,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Lead]:
        """Unconverted leads visible to the caller, newest first."""
        converted = exists().where(Student.lead_id == Lead.id)
        query = scope_leads(db.query(Lead).filter(~converted), user_id, user_role)
        if status:
            query = query.filter(Lead.status == status)
        return query.order_by(Lead.created_at.desc(), Lead.id.desc()).all()

    def get(
        self,
        db: Session,
        lead_id: int,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Lead:
        lead = db.get(Lead, lead_id)
        if lead is None:
            raise NotFoundError("Lead not found")
        if not can_see_lead(lead, user_id, user_role):
            raise AccessDeniedError("Lead not found", user_id=user_id, record_id=lead_id)
        return lead

    def create(self, db: Session, *, obj_in: LeadCreate, actor: Optional[User] = None, commit: bool = True) -> Lead:
        """Insert the lead and its creation activity; with commit=False the caller owns the transaction."""
        data = claim_for_creator(obj_in.model_dump(), actor, LEAD_SCOPE_COLUMNS)
        lead = Lead(
            **data,
            is_lost=data["status"] == LEAD_LOST_STATUS,
            created_by=actor.id if actor else None,
            updated_by=actor.id if actor else None,
        )
        db.add(lead)
        db.flush()
        log_activity(
            db,
            "lead",
            lead.id,
            "created",
            "Lead created",
            f"Lead {lead.name} was added to the system",
            actor=actor,
        )
        if commit:
            db.commit()
            db.refresh(lead)
            logger.info("Lead %s created by user %s", lead.id, actor.id if actor else None)
        return lead

    def update(
        self,
        db: Session,
        lead_id: int,
        *,
        obj_in: LeadUpdate,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> Lead:
        lead = self.get(db, lead_id, user_id=user_id, user_role=user_role)
        changes = writable_changes(Lead, obj_in)
        status_changed = "status" in changes and validate_transition("leads", "status", lead.status, changes["status"])
        flagged = status_changed and is_off_path("leads", "status", lead.status, changes["status"])

        before = apply_changes(lead, changes)
        log_field_changes(db, "lead", lead.id, before, changes, actor)
        if flagged:
            log_flagged_transition(db, "lead", lead.id, "status", before["status"], lead.status, actor)
        if status_changed:
            lead.is_lost = lead.status == LEAD_LOST_STATUS
        if actor is not None:
            lead.updated_by = actor.id
        db.commit()
        db.refresh(lead)
        return lead

    def remove(
        self,
        db: Session,
        lead_id: int,
        *,
        actor: Optional[User] = None,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> bool:
        lead = db.get(Lead, lead_id)
        if lead is None:
            return False
        if not can_see_lead(lead, user_id, user_role):
            raise AccessDeniedError("Lead not found", user_id=user_id, record_id=lead_id)
        if lead.student is not None:
            lead.student.lead_id = None
        log_activity(db, "lead", lead.id, "deleted", "Lead deleted", f"Lead {lead.name} was deleted", actor=actor)
        db.delete(lead)
        db.commit()
        logger.info("Lead %s deleted by user %s", lead_id, actor.id if actor else None)
        return True

    def search(
        self,
        db: Session,
        query: str,
        *,
        user_id: Optional[int] = None,
        user_role: Optional[str] = None,
    ) -> List[Lead]:
        pattern = f"%{query.strip()}%"
        rows = db.query(Lead).filter(
            or_(
                Lead.name.ilike(pattern),
                Lead.email.ilike(pattern),
                Lead.program.ilike(pattern),
                Lead.country.ilike(pattern),
            )
        )
        return scope_leads(rows, user_id, user_role).order_by(Lead.created_at.desc(), Lead.id.desc()).all()


lead_crud = CRUDLead()
