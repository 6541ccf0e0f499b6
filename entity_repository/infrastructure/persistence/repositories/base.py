"""Behaviour shared by the hard-delete and soft-delete SQL repositories.

Subclasses set the mapped class on the model class variable:

    class CustomerRepository(SqlSoftDeleteEntityRepository[Customer]):
        model = Customer

Override _base_statement() to attach loader options (e.g. selectinload of a
relationship) to every query that returns whole entities. Projections start
from a plain select of the model, since loader options do not apply to them.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession

from entity_repository.domain.exceptions import InvalidArgumentError, NullArgumentError
from entity_repository.domain.models.pagination import ListWrapper, PageMetadata
from entity_repository.infrastructure.persistence.merge import apply_patch
from entity_repository.infrastructure.persistence.models.base import utcnow
from entity_repository.infrastructure.persistence.query import (
    count_statement,
    paginate,
    project,
    validate_page,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def next_updated(previous: datetime | None) -> datetime:
    """Current time, nudged past previous so updated strictly increases."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def require_entity(entity: Any) -> None:
    if entity is None:
        raise NullArgumentError("entity")


class SqlRepositoryBase(Generic[T]):
    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _base_statement(self) -> Select:
        return select(self.model)

    def _select(self, columns: Any = None) -> Select:
        return self._base_statement() if columns is None else select(self.model)

    def _require_id(self, id: Any) -> None:
        if self.model.is_unset_id(id):
            raise InvalidArgumentError("id", "was not set")

    async def _fetch_one(self, stmt: Select) -> T | None:
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def _fetch_for_update(self, stmt: Select) -> T | None:
        # The patch may be the loaded instance edited in place; its pending
        # read-only changes must survive until apply_patch reverts them.
        with self._session.no_autoflush:
            return await self._fetch_one(stmt)

    async def _stored(self, entity: Any, stmt: Select) -> T | None:
        """entity itself when it is loaded in this session, else the row with its id.

        Transient and detached instances (or any object carrying an id) are
        resolved by key so delete and restore never insert a new row.
        """
        state = sa_inspect(entity, raiseerr=False)
        if state is not None and state.persistent and entity in self._session:
            return entity
        id = getattr(entity, "id", None)
        if self.model.is_unset_id(id):
            return None
        return await self._fetch_one(stmt.where(self.model.id == id))

    async def _fetch_all(self, stmt: Select, columns: Any = None) -> list[Any]:
        scalars = True
        if columns is not None:
            stmt, scalars = project(stmt, columns)
        result = await self._session.execute(stmt)
        return list(result.scalars().all()) if scalars else list(result.all())

    async def _fetch_page(
        self, stmt: Select, page: int, page_size: int, columns: Any = None
    ) -> ListWrapper[Any]:
        validate_page(page, page_size)
        total = await self._session.scalar(count_statement(stmt))
        data = await self._fetch_all(paginate(stmt, page, page_size), columns)
        return ListWrapper(
            data=data,
            meta=PageMetadata(
                total=total or 0,
                per_page=page_size,
                current_page=page,
                records_in_dataset=len(data),
            ),
        )

    async def add(self, entity: T) -> T:
        require_entity(entity)
        if self.model.is_unset_id(entity.id):
            entity.id = self.model.generate_id()
        now = utcnow()
        entity.created = now
        entity.updated = now
        self._session.add(entity)
        await self._session.flush()
        logger.debug("Added %s %s", self.model.__name__, entity.id)
        return entity

    async def _merge(self, stored: T, patch: Any) -> T:
        changed = apply_patch(stored, patch)
        stored.updated = next_updated(stored.updated)
        await self._session.flush()
        logger.debug(
            "Updated %s %s (changed: %s)",
            self.model.__name__,
            stored.id,
            ", ".join(changed) or "none",
        )
        return stored

    def _patch_id(self, patch: Any) -> Any:
        require_entity(patch)
        id = getattr(patch, "id", None)
        self._require_id(id)
        return id
