"""Helpers shared by the entity crud objects."""

from pydantic import BaseModel


def writable_changes(model, obj_in: BaseModel) -> dict:
    """Fields present in a partial update payload that map to columns.

    An explicit null for a NOT NULL column is dropped rather than written.
    """
    columns = model.__table__.columns
    changes = {}
    for field, value in obj_in.model_dump(exclude_unset=True).items():
        if field not in columns:
            continue
        if value is None and not columns[field].nullable:
            continue
        changes[field] = value
    return changes


def apply_changes(db_obj, changes: dict) -> dict:
    """Assign changes onto the row and return the previous values."""
    before = {field: getattr(db_obj, field) for field in changes}
    for field, value in changes.items():
        setattr(db_obj, field, value)
    return before
