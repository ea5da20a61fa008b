"""University application endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_application import application_crud
from backend.app.crud.crud_dropdown import dropdown_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.application import ApplicationCreate, ApplicationRead, ApplicationUpdate
from backend.app.schemas.status import StatusProgress
from backend.app.services.status_flow import build_progress

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationRead])
async def list_applications(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return application_crud.get_multi(db, user_id=current_user.id, user_role=current_user.role)


@router.post("", response_model=ApplicationRead, status_code=status.HTTP_201_CREATED)
async def create_application(
    application_in: ApplicationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return application_crud.create(
        db, obj_in=application_in, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )


@router.get("/student/{student_id}", response_model=list[ApplicationRead])
async def list_student_applications(
    student_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return application_crud.get_by_student(db, student_id, user_id=current_user.id, user_role=current_user.role)


@router.get("/{application_id}", response_model=ApplicationRead)
async def get_application(
    application_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return application_crud.get(db, application_id, user_id=current_user.id, user_role=current_user.role)


@router.put("/{application_id}", response_model=ApplicationRead)
async def update_application(
    application_id: int,
    application_in: ApplicationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return application_crud.update(
        db,
        application_id,
        obj_in=application_in,
        actor=current_user,
        user_id=current_user.id,
        user_role=current_user.role,
    )


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    removed = application_crud.remove(
        db, application_id, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )
    if not removed:
        raise HTTPException(status_code=404, detail="Application not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{application_id}/status-progress", response_model=StatusProgress)
async def application_status_progress(
    application_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    application = application_crud.get(db, application_id, user_id=current_user.id, user_role=current_user.role)
    steps = dropdown_crud.get_steps(db, "applications", "app_status")
    return {"field": "appStatus", "current": application.app_status, "steps": build_progress(steps, application.app_status)}
