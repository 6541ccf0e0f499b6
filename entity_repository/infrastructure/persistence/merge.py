"""Partial-update merger.

Callers usually send sparse patches: an entity carrying an id and the few
fields they want changed, with everything else left as None. Replacing the
stored row with such a patch would null out the untouched columns, so
changes are merged column by column instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

from .models.base import read_only_fields

# stamped by the repository itself after a merge
_REPOSITORY_MANAGED = frozenset({"updated"})


def mergeable_fields(model: type) -> list[str]:
    """Column attributes of model a patch may overwrite.

    Primary key columns, read-only columns and repository-managed timestamps
    are excluded. Relationships are never merged.
    """
    mapper = sa_inspect(model)
    primary_keys = {mapper.get_property_by_column(column).key for column in mapper.primary_key}
    excluded = primary_keys | read_only_fields(model) | _REPOSITORY_MANAGED
    return [attr.key for attr in mapper.column_attrs if attr.key not in excluded]


def patch_values(patch: Any, fields: list[str]) -> dict[str, Any]:
    """The non-None values patch supplies for fields.

    A Pydantic patch only contributes the fields that were explicitly set.
    """
    if isinstance(patch, BaseModel):
        supplied = patch.model_dump(exclude_unset=True)
        return {key: supplied[key] for key in fields if supplied.get(key) is not None}
    values = {}
    for key in fields:
        value = getattr(patch, key, None)
        if value is not None:
            values[key] = value
    return values


def revert_read_only(stored: Any) -> list[str]:
    """Undo pending changes to read-only columns of a persistent instance."""
    state = sa_inspect(stored)
    reverted = []
    for key in read_only_fields(type(stored)):
        if key not in state.attrs:
            continue
        history = state.attrs[key].history
        if history.deleted:
            setattr(stored, key, history.deleted[0])
            reverted.append(key)
    return reverted


def apply_patch(stored: Any, patch: Any) -> list[str]:
    """Copy every changed, mergeable, non-None value of patch onto stored.

    Returns the names of the columns that changed. When patch is stored
    itself (the caller modified the loaded instance in place) only the
    read-only columns are touched, reverting them to their loaded values.
    """
    if patch is stored:
        revert_read_only(stored)
        return []
    changed = []
    for key, value in patch_values(patch, mergeable_fields(type(stored))).items():
        if getattr(stored, key) != value:
            setattr(stored, key, value)
            changed.append(key)
    return changed
