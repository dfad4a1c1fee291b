"""
Database fixtures for persistence and API tests.

Two backends are provided:

- SQLite (aiosqlite) in a per-test temporary file. Fast, used by default.
- PostgreSQL via Testcontainers, for ``@pytest.mark.integration`` tests
  that need the production dialect. Requires Docker.

Usage:
    from tests.shared.fixtures.database import sqlite_session

    async def test_something(sqlite_session):
        repo = SomeRepository(sqlite_session)
        await repo.save(entity)
"""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from techcare_identity.infrastructure.persistence.sqlalchemy import Base

# Use same Postgres major version as production
POSTGRES_IMAGE = "postgres:16-alpine"


def create_sqlite_engine(path) -> AsyncEngine:
    return create_async_engine(
        f"sqlite+aiosqlite:///{path}",
        echo=False,
        poolclass=NullPool,  # Connections must not outlive the test loop
    )


def create_schema(engine: AsyncEngine) -> None:
    """Create all tables from synchronous code (own event loop)."""

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(_create())
    finally:
        loop.close()


def make_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def sqlite_engine(tmp_path) -> AsyncEngine:
    """SQLite engine on a fresh file with the schema already created."""
    engine = create_sqlite_engine(tmp_path / "techcare-test.db")
    create_schema(engine)
    return engine


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine):
    """Provide an isolated SQLite session for one test."""
    async with make_session_maker(sqlite_engine)() as session:
        yield session
        await session.rollback()
    await sqlite_engine.dispose()


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean database state via table drop/create.
    """
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_engine(postgres_container) -> AsyncEngine:
    """Async engine connected to the test container."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://",
        "postgresql+asyncpg://",
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    return create_async_engine(async_url, echo=False, poolclass=NullPool)


@pytest_asyncio.fixture
async def postgres_session(postgres_engine):
    """
    Provide an isolated PostgreSQL session for one test.

    Drops and recreates all tables first so each test starts clean.
    """
    async with postgres_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with make_session_maker(postgres_engine)() as session:
        yield session
        await session.rollback()

    async with postgres_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
