"""Admission outcome endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_admission import admission_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.admission import AdmissionCreate, AdmissionRead, AdmissionUpdate

router = APIRouter(prefix="/admissions", tags=["admissions"])


@router.get("", response_model=list[AdmissionRead])
async def list_admissions(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return admission_crud.get_multi(db, user_id=current_user.id, user_role=current_user.role)


@router.post("", response_model=AdmissionRead, status_code=status.HTTP_201_CREATED)
async def create_admission(
    admission_in: AdmissionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return admission_crud.create(
        db, obj_in=admission_in, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )


@router.get("/student/{student_id}", response_model=list[AdmissionRead])
async def list_student_admissions(
    student_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return admission_crud.get_by_student(db, student_id, user_id=current_user.id, user_role=current_user.role)


@router.get("/{admission_id}", response_model=AdmissionRead)
async def get_admission(
    admission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return admission_crud.get(db, admission_id, user_id=current_user.id, user_role=current_user.role)


@router.put("/{admission_id}", response_model=AdmissionRead)
async def update_admission(
    admission_id: int,
    admission_in: AdmissionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return admission_crud.update(
        db, admission_id, obj_in=admission_in, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )


@router.delete("/{admission_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_admission(
    admission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    removed = admission_crud.remove(
        db, admission_id, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )
    if not removed:
        raise HTTPException(status_code=404, detail="Admission not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
