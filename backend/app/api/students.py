"""Student management endpoints, including lead conversion."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_student import student_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.student import StudentConvertFromLead, StudentCreate, StudentRead, StudentUpdate

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=list[StudentRead])
async def list_students(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return student_crud.get_multi(db, user_id=current_user.id, user_role=current_user.role)


@router.post("", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(
    student_in: StudentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return student_crud.create(
        db, obj_in=student_in, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )


@router.post("/convert-from-lead", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def convert_from_lead(
    payload: StudentConvertFromLead,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return student_crud.convert_from_lead(
        db, obj_in=payload, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )


@router.get("/{student_id}", response_model=StudentRead)
async def get_student(student_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return student_crud.get(db, student_id, user_id=current_user.id, user_role=current_user.role)


@router.put("/{student_id}", response_model=StudentRead)
async def update_student(
    student_id: int,
    student_in: StudentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return student_crud.update(
        db, student_id, obj_in=student_in, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    removed = student_crud.remove(
        db, student_id, actor=current_user, user_id=current_user.id, user_role=current_user.role
    )
    if not removed:
        raise HTTPException(status_code=404, detail="Student not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
