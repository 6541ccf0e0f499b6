"""SQLAlchemy implementation of EntityRepository (rows are physically removed)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select

from entity_repository.domain.models.enums import OrderDirection
from entity_repository.domain.models.pagination import ListWrapper
from entity_repository.domain.repositories.base import EntityRepository
from entity_repository.infrastructure.persistence.query import compose

from .base import SqlRepositoryBase, T, require_entity

logger = logging.getLogger(__name__)


class SqlEntityRepository(SqlRepositoryBase[T], EntityRepository[T]):
    def _query(
        self,
        filters: Sequence[Any] | Any,
        order_by: Any,
        direction: OrderDirection,
        columns: Any = None,
    ) -> Select:
        return compose(self._select(columns), filters, order_by, direction)

    async def get(self, id: Any) -> T | None:
        if self.model.is_unset_id(id):
            return None
        return await self._fetch_one(self._base_statement().where(self.model.id == id))

    async def list(
        self,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> list[T]:
        return await self._fetch_all(self._query(filters, order_by, direction))

    async def list_paginated(
        self,
        page: int,
        page_size: int,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> ListWrapper[T]:
        return await self._fetch_page(self._query(filters, order_by, direction), page, page_size)

    async def list_projected(
        self,
        columns: Any,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> list[Any]:
        return await self._fetch_all(self._query(filters, order_by, direction, columns), columns)

    async def list_projected_paginated(
        self,
        columns: Any,
        page: int,
        page_size: int,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> ListWrapper[Any]:
        return await self._fetch_page(
            self._query(filters, order_by, direction, columns), page, page_size, columns
        )

    async def update(self, entity: Any) -> T | None:
        id = self._patch_id(entity)
        stored = await self._fetch_for_update(
            self._base_statement().where(self.model.id == id)
        )
        if stored is None:
            logger.debug("Update skipped: %s %s not found", self.model.__name__, id)
            return None
        return await self._merge(stored, entity)

    async def delete(self, entity: T) -> bool:
        require_entity(entity)
        stored = await self._stored(entity, self._base_statement())
        if stored is None:
            logger.debug("Delete skipped: %s not found", self.model.__name__)
            return False
        await self._session.delete(stored)
        await self._session.flush()
        logger.debug("Deleted %s %s", self.model.__name__, stored.id)
        return True

    async def delete_by_id(self, id: Any) -> bool:
        self._require_id(id)
        entity = await self.get(id)
        if entity is None:
            return False
        return await self.delete(entity)
