"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── techcare/              # API, access gate and CLI tests
    │   ├── unit/
    │   └── integration/
    ├── techcare_auth/         # Token codec and password hasher
    │   └── unit/
    ├── techcare_identity/     # Principals, workflows, storage, persistence
    │   ├── unit/
    │   └── integration/
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests (Postgres via
                         Testcontainers, needs Docker)
    RUN_ALL_TESTS=1      Run all tests

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")

# The API module builds its app at import time, which needs a signing key
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")

from techcare_config import clear_settings_cache  # noqa: E402

TEST_JWT_SECRET = os.environ["JWT_SECRET_KEY"]


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests against a real PostgreSQL container (auto-skipped)",
    )


def _flag(config, option: str, env_var: str) -> bool:
    return config.getoption(option) or os.environ.get(env_var, "").lower() in (
        "1",
        "true",
        "yes",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if _flag(config, "--run-all", "RUN_ALL_TESTS"):
        return
    if _flag(config, "--run-integration", "RUN_INTEGRATION"):
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
