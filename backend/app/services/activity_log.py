"""Activity trail helpers: creation/deletion events, per-field update diffs and lead-to-student transfer.

Helpers add rows to the session; the caller commits.
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from backend.app.models.activity import Activity
from backend.app.models.user import User

logger = logging.getLogger(__name__)

SYSTEM_USER_NAME = "Next Bot"
SKIPPED_FIELDS = {"created_at", "updated_at"}


def format_field_name(field_name: str) -> str:
    """camelCase or snake_case -> 'Title Case'."""
    spaced = re.sub(r"([A-Z])", r" \1", field_name).replace("_", " ")
    return " ".join(part[:1].upper() + part[1:] for part in spaced.split())


def stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _normalize(value: Any) -> Any:
    if isinstance(value, Decimal):
        return value.normalize()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Decimal(str(value)).normalize()
    if value == "":
        return None
    return value


def log_activity(
    db: Session,
    entity_type: str,
    entity_id: int,
    activity_type: str,
    title: str,
    description: Optional[str] = None,
    *,
    field_name: Optional[str] = None,
    old_value: Optional[str] = None,
    new_value: Optional[str] = None,
    actor: Optional[User] = None,
    created_at: Optional[datetime] = None,
) -> Activity:
    activity = Activity(
        entity_type=entity_type,
        entity_id=entity_id,
        activity_type=activity_type,
        title=title,
        description=description,
        field_name=field_name,
        old_value=old_value,
        new_value=new_value,
        user_id=actor.id if actor else None,
        user_name=actor.display_name if actor else SYSTEM_USER_NAME,
    )
    if created_at is not None:
        activity.created_at = created_at
    db.add(activity)
    return activity


def log_field_changes(
    db: Session,
    entity_type: str,
    entity_id: int,
    before: dict,
    changes: dict,
    actor: Optional[User] = None,
) -> list[Activity]:
    """Write one 'updated' activity per field whose value actually changed."""
    written = []
    for field, new_value in changes.items():
        if field in SKIPPED_FIELDS:
            continue
        old_value = before.get(field)
        if _normalize(old_value) == _normalize(new_value):
            continue
        wire_name = to_camel(field)
        display = format_field_name(wire_name)
        old_text = stringify(old_value)
        new_text = stringify(new_value)
        written.append(
            log_activity(
                db,
                entity_type,
                entity_id,
                "updated",
                f"{display} updated",
                f'{display} changed from "{old_text or "empty"}" to "{new_text or "empty"}"',
                field_name=wire_name,
                old_value=old_text,
                new_value=new_text,
                actor=actor,
            )
        )
    return written


def list_activities(db: Session, entity_type: str, entity_id: int) -> list[Activity]:
    return (
        db.query(Activity)
        .filter(Activity.entity_type == entity_type, Activity.entity_id == entity_id)
        .order_by(Activity.created_at.desc(), Activity.id.desc())
        .all()
    )


def transfer_activities(
    db: Session,
    from_type: str,
    from_id: int,
    to_type: str,
    to_id: int,
    actor: Optional[User] = None,
) -> list[Activity]:
    """Copy every activity of the source record onto the target, then append one 'converted' entry.

    Source rows are left untouched.
    """
    source = (
        db.query(Activity)
        .filter(Activity.entity_type == from_type, Activity.entity_id == from_id)
        .order_by(Activity.created_at.asc(), Activity.id.asc())
        .all()
    )
    copies = []
    for activity in source:
        copy = Activity(
            entity_type=to_type,
            entity_id=to_id,
            activity_type=activity.activity_type,
            title=activity.title,
            description=activity.description,
            field_name=activity.field_name,
            old_value=activity.old_value,
            new_value=activity.new_value,
            user_id=activity.user_id,
            user_name=activity.user_name,
            created_at=activity.created_at,
        )
        db.add(copy)
        copies.append(copy)
    copies.append(
        log_activity(
            db,
            to_type,
            to_id,
            "converted",
            f"Converted from {from_type}",
            f"This record was converted from {from_type} ID {from_id}. All previous activities have been preserved.",
            actor=actor,
        )
    )
    logger.info("Transferred %s activities from %s %s to %s %s", len(source), from_type, from_id, to_type, to_id)
    return copies


def log_flagged_transition(
    db: Session,
    entity_type: str,
    entity_id: int,
    field: str,
    old_value: Any,
    new_value: Any,
    actor: Optional[User] = None,
) -> Activity:
    """Record a status move that skipped the usual flow so it can be reviewed later."""
    wire_name = to_camel(field)
    display = format_field_name(wire_name)
    old_text = stringify(old_value)
    new_text = stringify(new_value)
    logger.warning(
        "Off-flow %s change on %s %s: %s -> %s by user %s",
        wire_name,
        entity_type,
        entity_id,
        old_text,
        new_text,
        actor.id if actor else None,
    )
    return log_activity(
        db,
        entity_type,
        entity_id,
        "flagged",
        f"{display} change flagged",
        f'{display} moved from "{old_text or "empty"}" to "{new_text}" outside the usual flow',
        field_name=wire_name,
        old_value=old_text,
        new_value=new_text,
        actor=actor,
    )
