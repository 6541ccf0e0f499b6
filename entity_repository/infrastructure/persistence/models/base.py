"""Declarative mixins that give a mapped class the entity shape.

Combine one mixin with the application's declarative base:

    class Customer(SoftDeleteEntityMixin, Base):
        __tablename__ = "customers"
        __read_only__ = frozenset({"external_ref"})

        name: Mapped[str] = mapped_column(Text)
        external_ref: Mapped[str | None] = mapped_column(Text, nullable=True)

__read_only__ names columns a partial update must never touch. The sets
declared along the MRO are merged, so a class only lists its own columns.

Keys default to client-generated UUIDs. A class may redeclare id with another
type; an autoincrementing integer key is assigned by the database on add():

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, Uuid, false
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

NIL_ID = uuid.UUID(int=0)

# default values of the supported key types: UUID, integer, string
_UNSET_IDS = (NIL_ID, 0, "")


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware UTC datetime on every dialect.

    PostgreSQL keeps the offset natively; SQLite drops it, so values are
    normalised to UTC on the way in and tagged as UTC on the way out.
    Naive values are taken to be UTC already.
    """

    impl = DateTime
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(timezone=True)

    def process_bind_param(self, value: Optional[datetime], dialect: Dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect: Dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_unset_id(value: Any) -> bool:
    """None or the default value of the key type (nil UUID, 0, "") means "no id yet"."""
    return value is None or value in _UNSET_IDS


def read_only_fields(model: type) -> frozenset[str]:
    """Union of every __read_only__ set declared on model and its bases."""
    fields: set[str] = set()
    for klass in model.__mro__:
        fields.update(vars(klass).get("__read_only__", ()))
    return frozenset(fields)


class EntityMixin:
    """Identity plus audit timestamps.

    created is stamped once by the repository's add(); updated is bumped on
    every successful update().
    """

    __read_only__ = frozenset({"created"})

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    updated: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)

    @classmethod
    def is_unset_id(cls, value: Any) -> bool:
        return is_unset_id(value)

    @classmethod
    def generate_id(cls) -> Optional[uuid.UUID]:
        """A fresh id for add(), or None to let the database assign one.

        UUID keys are generated client-side. Subclasses that redeclare id with
        another type (e.g. an autoincrementing Integer) get None.
        """
        if sa_inspect(cls).primary_key[0].type.python_type is uuid.UUID:
            return uuid.uuid4()
        return None


class SoftDeleteEntityMixin(EntityMixin):
    """Entity that is flagged as deleted rather than removed.

    deleted is True exactly when deleted_at is set. Both are owned by the
    repository's delete() and restore().
    """

    __read_only__ = frozenset({"deleted", "deleted_at"})

    deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(), index=True
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime(), nullable=True)
