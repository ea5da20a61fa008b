"""Dropdown lookup endpoints feeding form selects and status progress bars."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_dropdown import dropdown_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.dropdown import DropdownCreate, DropdownModuleRead, DropdownRead
from backend.app.services.dropdown_fields import resolve_module

router = APIRouter(prefix="/dropdowns", tags=["dropdowns"])


@router.get("", response_model=list[DropdownRead])
async def list_dropdowns(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return dropdown_crud.get_multi(db)


@router.post("", response_model=DropdownRead, status_code=status.HTTP_201_CREATED)
async def create_dropdown(
    dropdown_in: DropdownCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dropdown_crud.create(db, obj_in=dropdown_in)


@router.delete("/{dropdown_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dropdown(dropdown_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    dropdown_crud.remove(db, dropdown_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{module}", response_model=DropdownModuleRead)
async def get_module_dropdowns(
    module: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return {"module_name": resolve_module(module), "fields": dropdown_crud.get_by_module(db, module)}


@router.get("/{module}/{field}", response_model=list[DropdownRead])
async def get_field_dropdowns(
    module: str,
    field: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dropdown_crud.get_by_field(db, module, field)
