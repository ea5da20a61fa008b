"""Status progress bar schemas."""

from typing import List

from backend.app.schemas.common import CamelModel


class StatusStep(CamelModel):
    key: str
    label: str
    sequence: int
    completed: bool
    current: bool


class StatusProgress(CamelModel):
    field: str
    current: str
    steps: List[StatusStep]
