"""SQLAlchemy implementation of UnitOfWork."""

from __future__ import annotations

import logging
from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession

from entity_repository.domain.repositories.base import UnitOfWork

logger = logging.getLogger(__name__)


class SqlUnitOfWork(UnitOfWork):
    """Thin commit / rollback pass-through to an AsyncSession.

    Used as an async context manager it commits on a clean exit and rolls
    back (then re-raises) when the block fails:

        async with SqlUnitOfWork(session):
            await repo.add(entity)
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        # Session.rollback expunges added objects, returns removed ones to
        # the persistent state and expires modified ones so they reload
        # their last-committed values. Repository writes are already flushed,
        # so the counts below only cover changes still pending in the session.
        logger.info(
            "Rolling back transaction (unflushed: %d added, %d modified, %d removed)",
            len(self._session.new),
            len(self._session.dirty),
            len(self._session.deleted),
        )
        await self._session.rollback()

    async def __aenter__(self) -> SqlUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()
