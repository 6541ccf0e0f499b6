"""Entity mixins and column types shared by every mapped entity."""

from .base import (
    NIL_ID,
    EntityMixin,
    SoftDeleteEntityMixin,
    UTCDateTime,
    is_unset_id,
    read_only_fields,
    utcnow,
)

__all__ = [
    "NIL_ID",
    "EntityMixin",
    "SoftDeleteEntityMixin",
    "UTCDateTime",
    "is_unset_id",
    "read_only_fields",
    "utcnow",
]
