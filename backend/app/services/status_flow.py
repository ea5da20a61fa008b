"""Status lifecycles for leads, applications and admissions.

Each guarded status field has a fixed set of states and a table of the usual
moves between them. Any state in the set can be reached in one update; moves
outside the table go through but are flagged on the activity trail. Values
outside the state set are rejected, and setting the current value again is a
no-op.
"""

from typing import Iterable, Optional

from backend.app.core.exceptions import InvalidTransitionError

LEAD_STATUSES = ("new", "first_touch", "interested", "meeting", "follow_up", "lost")
LEAD_STATUS_LABELS = {
    "new": "New",
    "first_touch": "First Touch",
    "interested": "Interested",
    "meeting": "Meeting",
    "follow_up": "Follow Up",
    "lost": "Lost",
}
LEAD_LOST_STATUS = "lost"

# Usual lead flow: forward jumps, one step back, drop to lost; lost reopens to new.
LEAD_STATUS_TRANSITIONS = {
    "new": {"first_touch", "interested", "meeting", "follow_up", "lost"},
    "first_touch": {"new", "interested", "meeting", "follow_up", "lost"},
    "interested": {"first_touch", "meeting", "follow_up", "lost"},
    "meeting": {"interested", "follow_up", "lost"},
    "follow_up": {"meeting", "lost"},
    "lost": {"new"},
}

APP_STATUSES = ("Open", "Needs Attention", "Closed")
APP_STATUS_TRANSITIONS = {
    "Open": {"Needs Attention", "Closed"},
    "Needs Attention": {"Open", "Closed"},
    "Closed": {"Open"},
}

VISA_STATUSES = (
    "pending",
    "not-applied",
    "applied",
    "interview-scheduled",
    "approved",
    "rejected",
    "on-hold",
)
VISA_STATUS_TRANSITIONS = {
    "pending": {"not-applied", "applied", "on-hold"},
    "not-applied": {"applied", "on-hold"},
    "applied": {"interview-scheduled", "approved", "rejected", "on-hold"},
    "interview-scheduled": {"approved", "rejected", "on-hold"},
    "on-hold": {"pending", "not-applied", "applied", "interview-scheduled"},
    "approved": {"on-hold"},
    "rejected": {"applied"},
}

# (module, field) -> (states in display order, transition table)
GUARDED_FIELDS = {
    ("leads", "status"): (LEAD_STATUSES, LEAD_STATUS_TRANSITIONS),
    ("applications", "app_status"): (APP_STATUSES, APP_STATUS_TRANSITIONS),
    ("admissions", "visa_status"): (VISA_STATUSES, VISA_STATUS_TRANSITIONS),
}

STUDENT_STATUS_LABELS = {
    "active": "Open",
    "inactive": "Closed",
    "enrolled": "Enrolled",
}


def states_for(module: str, field: str) -> Optional[tuple]:
    entry = GUARDED_FIELDS.get((module, field))
    return entry[0] if entry else None


def ensure_known_state(module: str, field: str, value: str) -> str:
    """Validator helper for create/update schemas; raises ValueError for pydantic."""
    states = states_for(module, field)
    if states is not None and value not in states:
        raise ValueError(f"{field} must be one of: {', '.join(states)}")
    return value


def validate_transition(module: str, field: str, current: Optional[str], requested: str) -> bool:
    """Return True when the value changes, False for a no-op; raise for a value outside the state set."""
    if current == requested:
        return False
    states = states_for(module, field)
    if states is not None and requested not in states:
        raise InvalidTransitionError(field, current, requested)
    return True


def is_off_path(module: str, field: str, current: Optional[str], requested: str) -> bool:
    """True when a real change skips the usual flow for the field."""
    entry = GUARDED_FIELDS.get((module, field))
    if entry is None or current == requested:
        return False
    transitions = entry[1]
    # Legacy or imported value outside the state set: moving onto the graph is normal.
    if current not in transitions:
        return False
    return requested not in transitions[current]


def student_status_label(status: Optional[str]) -> str:
    if not status:
        return ""
    return STUDENT_STATUS_LABELS.get(status.lower(), status.replace("_", " ").title())


def default_steps(module: str, field: str) -> list[dict]:
    states = states_for(module, field) or ()
    labels = LEAD_STATUS_LABELS if (module, field) == ("leads", "status") else {}
    return [
        {"key": state, "label": labels.get(state, state), "sequence": index}
        for index, state in enumerate(states)
    ]


def build_progress(steps: Iterable[dict], current: Optional[str]) -> list[dict]:
    """Mark every step up to and including the current one as completed.

    When the current value is not among the steps nothing is completed.
    """
    ordered = sorted(steps, key=lambda s: s.get("sequence") or 0)
    keys = [s["key"] for s in ordered]
    current_index = keys.index(current) if current in keys else -1
    return [
        {
            "key": step["key"],
            "label": step.get("label") or step["key"],
            "sequence": step.get("sequence") or 0,
            "completed": index <= current_index,
            "current": index == current_index,
        }
        for index, step in enumerate(ordered)
    ]
