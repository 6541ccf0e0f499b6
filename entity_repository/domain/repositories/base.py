"""Generic repository interfaces.

Concrete implementations live in entity_repository/infrastructure/persistence/
and are bound to a session at the application boundary.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / aiosqlite).
  - T is the entity type. Ids are whatever the entity key type is (UUID by
    default); None or the key type's default value means "not set".
  - filters are boolean expressions understood by the storage backend (a single
    expression or a sequence of them) and are
    ANDed together. order_by is a backend expression; None keeps the
    backend's natural order.
  - Not-found is reported as False / None. Invalid arguments raise
    InvalidArgumentError (NullArgumentError for a missing entity) before
    storage is touched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from entity_repository.domain.models.enums import OrderDirection, SoftDeleteMode
from entity_repository.domain.models.pagination import ListWrapper

T = TypeVar("T")


class BaseEntityRepository(ABC, Generic[T]):
    """Operations shared by the hard-delete and soft-delete repositories."""

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Persist a new entity, generating its id when unset, and stamp created/updated."""

    @abstractmethod
    async def delete(self, entity: T) -> bool:
        """Delete the stored record matching entity (by key when it is not loaded).

        Returns False when no such record exists.
        """

    @abstractmethod
    async def delete_by_id(self, id: Any) -> bool:
        """Delete the entity with the given id. Returns False when it does not exist."""


class EntityRepository(BaseEntityRepository[T]):
    """Repository for entities that are physically removed on delete."""

    @abstractmethod
    async def get(self, id: Any) -> T | None:
        """Return the entity with the given id, or None."""

    @abstractmethod
    async def list(
        self,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> list[T]:
        """Return every entity matching all filters."""

    @abstractmethod
    async def list_paginated(
        self,
        page: int,
        page_size: int,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> ListWrapper[T]:
        """Return one page of matching entities with pagination metadata."""

    @abstractmethod
    async def list_projected(
        self,
        columns: Any,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> list[Any]:
        """Return the given columns of every matching entity."""

    @abstractmethod
    async def list_projected_paginated(
        self,
        columns: Any,
        page: int,
        page_size: int,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
    ) -> ListWrapper[Any]:
        """Return one page of projected rows with pagination metadata."""

    @abstractmethod
    async def update(self, entity: Any) -> T | None:
        """Merge the non-None fields of entity onto the stored record.

        Returns the stored record, or None when no record has the given id.
        """


class SoftDeleteEntityRepository(BaseEntityRepository[T]):
    """Repository for entities that are flagged as deleted instead of removed."""

    @abstractmethod
    async def get(
        self, id: Any, mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED
    ) -> T | None:
        """Return the entity with the given id if it is visible in mode, or None."""

    @abstractmethod
    async def list(
        self,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> list[T]:
        """Return every entity visible in mode that matches all filters."""

    @abstractmethod
    async def list_paginated(
        self,
        page: int,
        page_size: int,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> ListWrapper[T]:
        """Return one page of visible, matching entities with pagination metadata."""

    @abstractmethod
    async def list_projected(
        self,
        columns: Any,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> list[Any]:
        """Return the given columns of every visible, matching entity."""

    @abstractmethod
    async def list_projected_paginated(
        self,
        columns: Any,
        page: int,
        page_size: int,
        filters: Sequence[Any] | None = None,
        order_by: Any = None,
        direction: OrderDirection = OrderDirection.ASCENDING,
        mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED,
    ) -> ListWrapper[Any]:
        """Return one page of projected rows with pagination metadata."""

    @abstractmethod
    async def update(
        self, entity: Any, mode: SoftDeleteMode = SoftDeleteMode.EXCLUDE_DELETED
    ) -> T | None:
        """Merge entity onto the stored record if its deleted state matches mode.

        Returns None when the record does not exist or fails the mode check.
        """

    @abstractmethod
    async def restore(self, entity: T) -> T | None:
        """Clear the deleted flag and timestamp of the stored record matching entity.

        Restoring an active entity is a no-op. Returns the stored record, or
        None when it does not exist.
        """

    @abstractmethod
    async def restore_by_id(self, id: Any) -> T | None:
        """Restore the entity with the given id, or return None if it does not exist."""


class UnitOfWork(ABC):
    """Commit-or-rollback boundary around a set of repository calls."""

    @abstractmethod
    async def commit(self) -> None:
        """Persist all pending changes."""

    @abstractmethod
    async def rollback(self) -> None:
        """Revert all pending changes to their last-persisted state."""
