"""
Fixtures for API tests.

The app runs against a per-test SQLite database with a recording notifier
and a local blob store in a temporary directory. ``TestClient`` is used
without its context manager so the lifespan never opens the configured
production database.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from techcare.presentation.api.app import create_app
from techcare.presentation.api.dependencies import (
    get_blob_store,
    get_db_session,
    get_notifier,
)
from techcare_config.settings import Settings
from techcare_identity.infrastructure.storage import LocalBlobStore, UploadPolicy
from tests.shared.fixtures.database import make_session_maker, sqlite_engine
from tests.shared.fixtures.factories import FAST_ROUNDS
from tests.techcare.integration.api.helpers import (
    ADMIN,
    API,
    CUSTOMER,
    PUBLIC_BASE_URL,
    TECHNICIAN,
    login,
    technician_files,
)

__all__ = ["sqlite_engine"]

API_JWT_SECRET = "api-test-secret-with-enough-length"


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr(API_JWT_SECRET),
        api_debug=True,
        password_hash_rounds=FAST_ROUNDS,
        public_base_url=PUBLIC_BASE_URL,
        frontend_base_url="http://frontend.test",
        upload_dir=tmp_path / "uploads",
        storage_backend="local",
        smtp_enabled=False,
    )


@pytest.fixture
def notifier() -> AsyncMock:
    """Records every message the app sends."""
    return AsyncMock()


@pytest.fixture
def blob_store(api_settings) -> LocalBlobStore:
    return LocalBlobStore(
        root=api_settings.upload_dir,
        public_base_url=PUBLIC_BASE_URL,
        policy=UploadPolicy(max_bytes=api_settings.max_upload_bytes),
    )


@pytest.fixture
def client(api_settings, sqlite_engine, notifier, blob_store) -> TestClient:
    app = create_app(api_settings)
    session_maker = make_session_maker(sqlite_engine)

    async def _db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _db_session
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_blob_store] = lambda: blob_store

    return TestClient(app)


@pytest.fixture
def admin_token(client) -> str:
    response = client.post(f"{API}/admin/signup", json=ADMIN)
    assert response.status_code == 201, response.text
    return login(client, "admin", ADMIN["email"], ADMIN["password"])


@pytest.fixture
def customer_token(client) -> str:
    response = client.post(f"{API}/customer/signup", json=CUSTOMER)
    assert response.status_code == 201, response.text
    return login(client, "customer", CUSTOMER["email"], CUSTOMER["password"])


@pytest.fixture
def technician_id(client) -> str:
    response = client.post(
        f"{API}/technician/signup",
        data=TECHNICIAN,
        files=technician_files(),
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]
