"""
Pytest configuration for techcare_identity persistence tests.

Tests run against SQLite by default. The PostgreSQL variants are marked
``integration`` and use Testcontainers.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    postgres_container,
    postgres_engine,
    postgres_session,
    sqlite_engine,
    sqlite_session,
)

__all__ = [
    "postgres_container",
    "postgres_engine",
    "postgres_session",
    "sqlite_engine",
    "sqlite_session",
]
