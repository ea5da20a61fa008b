"""University browsing endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.crud.crud_university import university_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.university import UniversityDetail, UniversitySummary

router = APIRouter(prefix="/universities", tags=["universities"])


@router.get("", response_model=list[UniversitySummary])
async def list_universities(
    country: str | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return university_crud.get_multi(db, country=country, q=q)


@router.get("/{university_id}", response_model=UniversityDetail)
async def get_university(
    university_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return university_crud.get(db, university_id)
