"""CRUD operations for dropdown lookup rows."""

from typing import Dict, List

from sqlalchemy.orm import Session

from backend.app.core.exceptions import ConflictError, NotFoundError
from backend.app.models.dropdown import Dropdown
from backend.app.schemas.dropdown import DropdownCreate
from backend.app.services import dropdown_fields, status_flow


class CRUDDropdown:
    def get_multi(self, db: Session) -> List[Dropdown]:
        return (
            db.query(Dropdown)
            .order_by(Dropdown.module_name, Dropdown.field_name, Dropdown.sequence, Dropdown.id)
            .all()
        )

    def get_by_module(self, db: Session, module: str) -> Dict[str, List[Dropdown]]:
        module = dropdown_fields.resolve_module(module)
        grouped: Dict[str, List[Dropdown]] = {field: [] for field in dropdown_fields.DROPDOWN_FIELDS[module]}
        rows = (
            db.query(Dropdown)
            .filter(Dropdown.module_name == module)
            .order_by(Dropdown.sequence, Dropdown.id)
            .all()
        )
        for row in rows:
            grouped.setdefault(row.field_name, []).append(row)
        return grouped

    def get_by_field(self, db: Session, module: str, field: str) -> List[Dropdown]:
        module, field = dropdown_fields.resolve_field(module, field)
        return (
            db.query(Dropdown)
            .filter(Dropdown.module_name == module, Dropdown.field_name == field)
            .order_by(Dropdown.sequence, Dropdown.id)
            .all()
        )

    def get_steps(self, db: Session, module: str, field: str) -> List[dict]:
        """Progress-bar steps for a status field; built-in state order when no rows are configured."""
        rows = self.get_by_field(db, module, field)
        if not rows:
            return status_flow.default_steps(module, field)
        return [{"key": row.key, "label": row.value, "sequence": row.sequence} for row in rows]

    def create(self, db: Session, *, obj_in: DropdownCreate) -> Dropdown:
        module, field = dropdown_fields.resolve_field(obj_in.module_name, obj_in.field_name)
        dropdown_fields.check_key(module, field, obj_in.key)
        existing = (
            db.query(Dropdown)
            .filter(Dropdown.module_name == module, Dropdown.field_name == field, Dropdown.key == obj_in.key)
            .first()
        )
        if existing:
            raise ConflictError(f"Dropdown key '{obj_in.key}' already exists for {module}.{field}")
        data = obj_in.model_dump()
        data.update(module_name=module, field_name=field)
        row = Dropdown(**data)
        db.add(row)
        db.commit()
        db.refresh(row)
        return row

    def remove(self, db: Session, dropdown_id: int) -> None:
        row = db.get(Dropdown, dropdown_id)
        if row is None:
            raise NotFoundError("Dropdown not found")
        db.delete(row)
        db.commit()


dropdown_crud = CRUDDropdown()
