"""SQLAlchemy implementation of SoftDeleteEntityRepository.

Deleting flags the row (deleted / deleted_at) instead of removing it. Every
read takes a SoftDeleteMode deciding whether flagged rows are visible; the
default hides them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select

from entity_repository.domain.models.enums import OrderDirection, SoftDeleteMode
from entity_repository.domain.models.pagination import ListWrapper
from entity_repository.domain.repositories.base import SoftDeleteEntityRepository
from entity_repository.infrastructure.persistence.merge import revert_read_only
from entity_repository.infrastructure.persistence.models.base import utcnow
from entity_repository.infrastructure.persistence.query import (
    apply_visibility,
    coerce_mode,
    compose,
)

from .base import SqlRepositoryBase, T, require_entity

logger = logging.getLogger(__name__)


class SqlSoftDeleteEntityRepository(SqlRepositoryBase[T], SoftDeleteEntityRepository[T]):
    def _visible(self, mode: Any, columns: Any = None) -> Select:
        return apply_visibility(self._select(columns), self.model, mode)

    def _query(
        self,
        filters: Sequence[Any] | Any,
        order_by: Any,
        direction: OrderDirection,
        mode: Any,
        columns: Any = None,
    ) -> Select:
        # visibility first, then caller filters, then ordering
        return compose(self._visible(mode, columns), filters, order_by, direction)

    async def get(
        self, id: Any, mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED
    ) -> T | None:
        stmt = self._visible(mode)
        if self.model.is_unset_id(id):
            return None
        return await self._fetch_one(stmt.where(self.model.id == id))

    async def list(
        self,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> list[T]:
        return await self._fetch_all(self._query(filters, order_by, direction, mode))

    async def list_paginated(
        self,
        page: int,
        page_size: int,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> ListWrapper[T]:
        return await self._fetch_page(
            self._query(filters, order_by, direction, mode), page, page_size
        )

    async def list_projected(
        self,
        columns: Any,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> list[Any]:
        return await self._fetch_all(
            self._query(filters, order_by, direction, mode, columns), columns
        )

    async def list_projected_paginated(
        self,
        columns: Any,
        page: int,
        page_size: int,
        filters: Sequence[Any] | Any = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> ListWrapper[Any]:
        return await self._fetch_page(
            self._query(filters, order_by, direction, mode, columns), page, page_size, columns
        )

    async def add(self, entity: T) -> T:
        require_entity(entity)
        entity.deleted = False
        entity.deleted_at = None
        return await super().add(entity)

    async def update(
        self, entity: Any, mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED
    ) -> T | None:
        id = self._patch_id(entity)
        mode = coerce_mode(mode)
        stored = await self._fetch_for_update(
            self._visible(SoftDeleteMode.INCLUDE_DELETED).where(self.model.id == id)
        )
        if stored is entity:
            # judge the mode on the persisted flag, not an in-place edit of it
            revert_read_only(stored)
        if stored is None or not mode.admits(stored.deleted):
            logger.debug(
                "Update skipped: %s %s not found in mode %s",
                self.model.__name__,
                id,
                mode.value,
            )
            return None
        return await self._merge(stored, entity)

    async def delete(self, entity: T) -> bool:
        require_entity(entity)
        stored = await self._stored(entity, self._visible(SoftDeleteMode.INCLUDE_DELETED))
        if stored is None:
            logger.debug("Delete skipped: %s not found", self.model.__name__)
            return False
        stored.deleted = True
        stored.deleted_at = utcnow()
        await self._session.flush()
        logger.debug("Soft-deleted %s %s", self.model.__name__, stored.id)
        return True

    async def delete_by_id(self, id: Any) -> bool:
        self._require_id(id)
        entity = await self.get(id)
        if entity is None:
            return False
        return await self.delete(entity)

    async def restore(self, entity: T) -> T | None:
        require_entity(entity)
        stored = await self._stored(entity, self._visible(SoftDeleteMode.INCLUDE_DELETED))
        if stored is None:
            logger.debug("Restore skipped: %s not found", self.model.__name__)
            return None
        stored.deleted = False
        stored.deleted_at = None
        await self._session.flush()
        logger.debug("Restored %s %s", self.model.__name__, stored.id)
        return stored

    async def restore_by_id(self, id: Any) -> T | None:
        self._require_id(id)
        entity = await self.get(id, SoftDeleteMode.INCLUDE_DELETED)
        if entity is None:
            return None
        return await self.restore(entity)
