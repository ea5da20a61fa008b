"""Dropdown lookup schemas."""

from typing import Dict, List

from pydantic import Field

from backend.app.schemas.common import CamelModel, ORMModel


class DropdownCreate(CamelModel):
    module_name: str
    field_name: str
    key: str = Field(min_length=1)
    value: str = Field(min_length=1)
    sequence: int = 0
    is_default: bool = False


class DropdownRead(ORMModel):
    id: int
    module_name: str
    field_name: str
    key: str
    value: str
    sequence: int
    is_default: bool


class DropdownModuleRead(CamelModel):
    """All dropdown rows of one module, keyed by field."""

    module_name: str
    fields: Dict[str, List[DropdownRead]]
