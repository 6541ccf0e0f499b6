"""Mapped entities and repositories used across the test suite."""

from __future__ import annotations

import string
from typing import Optional
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import ForeignKey, Integer, Select, Text, select
from sqlalchemy.orm import Mapped, mapped_column, relationship, selectinload

from entity_repository.infrastructure.database import Base
from entity_repository.infrastructure.persistence.models import (
    EntityMixin,
    SoftDeleteEntityMixin,
)
from entity_repository.infrastructure.persistence.repositories import (
    SqlEntityRepository,
    SqlSoftDeleteEntityRepository,
)

LETTERS = list(string.ascii_lowercase[:14])


class SampleEntity(EntityMixin, Base):
    __tablename__ = "sample_entities"
    __read_only__ = frozenset({"read_only_property"})

    property: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    read_only_property: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class SampleSoftDeleteEntity(SoftDeleteEntityMixin, Base):
    __tablename__ = "sample_soft_delete_entities"

    property: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class SampleCounter(EntityMixin, Base):
    """Integer-keyed entity; the database assigns its id."""

    __tablename__ = "sample_counters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class SampleParent(EntityMixin, Base):
    __tablename__ = "sample_parents"

    property: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    children: Mapped[list[SampleChild]] = relationship(back_populates="parent")


class SampleChild(EntityMixin, Base):
    __tablename__ = "sample_children"

    parent_id: Mapped[UUID] = mapped_column(ForeignKey("sample_parents.id"))
    property: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    parent: Mapped[SampleParent] = relationship(back_populates="children")


class SampleEntityRepository(SqlEntityRepository[SampleEntity]):
    model = SampleEntity


class SampleSoftDeleteEntityRepository(SqlSoftDeleteEntityRepository[SampleSoftDeleteEntity]):
    model = SampleSoftDeleteEntity


class SampleCounterRepository(SqlEntityRepository[SampleCounter]):
    model = SampleCounter


class SampleParentRepository(SqlEntityRepository[SampleParent]):
    model = SampleParent

    def _base_statement(self) -> Select:
        return select(SampleParent).options(selectinload(SampleParent.children))


class SampleBareParentRepository(SqlEntityRepository[SampleParent]):
    model = SampleParent


class SamplePatch(BaseModel):
    """Sparse update DTO: only explicitly-set fields are merged."""

    id: UUID
    property: Optional[str] = None
    read_only_property: Optional[str] = None
