"""Async SQLAlchemy engine, session factory, and session dependency."""

from collections.abc import AsyncGenerator

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "postgresql+asyncpg://localhost:5432/entity_repository"
    database_echo: bool = False
    database_pool_pre_ping: bool = True


class Base(DeclarativeBase):
    """Shared declarative base for entity models."""


def create_engine(settings: Settings | None = None) -> AsyncEngine:
    """Build an async engine from settings (read from the environment when omitted)."""
    settings = settings or Settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=settings.database_pool_pre_ping,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_session(
    factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a transactional async session; commits on exit, rolls back on error.

    Bind the factory with functools.partial to use it as a FastAPI dependency.
    """
    async with factory() as session:
        async with session.begin():
            yield session
