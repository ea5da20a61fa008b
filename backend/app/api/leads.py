"""Lead management endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_dropdown import dropdown_crud
from backend.app.crud.crud_lead import lead_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.lead import LeadCreate, LeadRead, LeadUpdate
from backend.app.schemas.status import StatusProgress
from backend.app.services.status_flow import build_progress

router = APIRouter(prefix="/leads", tags=["leads"])


@router.get("", response_model=list[LeadRead])
async def list_leads(
    status: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return lead_crud.get_multi(db, user_id=current_user.id, user_role=current_user.role, status=status)


@router.post("", response_model=LeadRead, status_code=status.HTTP_201_CREATED)
async def create_lead(lead_in: LeadCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return lead_crud.create(db, obj_in=lead_in, actor=current_user)


@router.get("/{lead_id}", response_model=LeadRead)
async def get_lead(lead_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return lead_crud.get(db, lead_id, user_id=current_user.id, user_role=current_user.role)


@router.put("/{lead_id}", response_model=LeadRead)
async def update_lead(
    lead_id: int,
    lead_in: LeadUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return lead_crud.update(
        db, lead_id, obj_in=lead_in, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lead(lead_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    removed = lead_crud.remove(db, lead_id, actor=current_user, user_id=current_user.id, user_role=current_user.role)
    if not removed:
        raise HTTPException(status_code=404, detail="Lead not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{lead_id}/status-progress", response_model=StatusProgress)
async def lead_status_progress(
    lead_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    lead = lead_crud.get(db, lead_id, user_id=current_user.id, user_role=current_user.role)
    steps = dropdown_crud.get_steps(db, "leads", "status")
    return {"field": "status", "current": lead.status, "steps": build_progress(steps, lead.status)}
