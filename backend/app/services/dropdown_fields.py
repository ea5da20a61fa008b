"""Known dropdown modules and the field keys each one exposes."""

import re

from backend.app.core.exceptions import ServiceError
from backend.app.services import status_flow

DROPDOWN_FIELDS = {
    "leads": ("status", "type", "source", "interested_country", "study_level", "study_plan"),
    "students": ("status", "expectation", "elt_test", "consultancy_fee", "scholarship"),
    "applications": ("app_status", "case_status", "channel_partner", "course_type"),
    "admissions": ("status", "case_status", "visa_status"),
}


class UnknownDropdownError(ServiceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


def normalize_name(raw: str) -> str:
    return re.sub(r"[\s\-]+", "_", (raw or "").strip().lower())


def resolve_module(raw: str) -> str:
    module = normalize_name(raw)
    if module not in DROPDOWN_FIELDS:
        raise UnknownDropdownError(f"Unknown dropdown module '{raw}'")
    return module


def resolve_field(module: str, raw: str) -> tuple[str, str]:
    module = resolve_module(module)
    field = normalize_name(raw)
    if field not in DROPDOWN_FIELDS[module]:
        raise UnknownDropdownError(f"Unknown dropdown field '{raw}' for module '{module}'")
    return module, field


def check_key(module: str, field: str, key: str) -> None:
    states = status_flow.states_for(module, field)
    if states is not None and key not in states:
        raise UnknownDropdownError(f"Key '{key}' is not a valid {module}.{field} value; expected one of: {', '.join(states)}")
