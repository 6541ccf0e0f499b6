"""Shared fixtures: an in-memory SQLite database seeded with sample entities.

Seed layout mirrors the scenarios the suite checks:
  - one "base" entity with an empty property
  - fourteen entities with single-letter properties "a".."n"
  - for the soft-delete table, one extra entity that is already deleted
Seeded timestamps lie in the past so updates always move them forward.
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from entity_repository.infrastructure.database import Base, create_session_factory
from sample_entities import (
    LETTERS,
    SampleEntity,
    SampleEntityRepository,
    SampleSoftDeleteEntity,
    SampleSoftDeleteEntityRepository,
)


def _past() -> datetime:
    return datetime.now(timezone.utc) - timedelta(minutes=42)


@pytest.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with create_session_factory(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def seeded(session):
    now = _past()
    entity = SampleEntity(
        id=uuid4(),
        created=now,
        updated=now,
        property="",
        read_only_property="I'm readonly",
    )
    items = [
        SampleEntity(id=uuid4(), created=now, updated=now, property=p, read_only_property=None)
        for p in LETTERS
    ]
    session.add_all([entity, *items])
    await session.commit()
    return SimpleNamespace(entity=entity, items=items)


@pytest.fixture
async def soft_seeded(session):
    now = _past()
    entity = SampleSoftDeleteEntity(
        id=uuid4(), created=now, updated=now, property="", deleted=False, deleted_at=None
    )
    deleted_entity = SampleSoftDeleteEntity(
        id=uuid4(),
        created=now - timedelta(minutes=42),
        updated=now - timedelta(minutes=42),
        property="I'm deleted",
        deleted=True,
        deleted_at=now,
    )
    items = [
        SampleSoftDeleteEntity(
            id=uuid4(), created=now, updated=now, property=p, deleted=False, deleted_at=None
        )
        for p in LETTERS
    ]
    session.add_all([entity, deleted_entity, *items])
    await session.commit()
    return SimpleNamespace(entity=entity, deleted_entity=deleted_entity, items=items)


@pytest.fixture
def repo(session):
    return SampleEntityRepository(session)


@pytest.fixture
def soft_repo(session):
    return SampleSoftDeleteEntityRepository(session)
