"""Unit tests for SupabaseBlobStore using an httpx mock transport."""

import httpx
import pytest

from techcare_identity.infrastructure.storage import (
    BlobCategory,
    BlobStorageError,
    SupabaseBlobStore,
    UploadPolicy,
)
from tests.shared.fixtures.factories import png_upload

BASE_URL = "https://project.supabase.co"


def _store(handler) -> SupabaseBlobStore:
    return SupabaseBlobStore(
        base_url=BASE_URL,
        service_key="service-key",
        bucket="techcare",
        policy=UploadPolicy(),
        transport=httpx.MockTransport(handler),
    )


class TestSupabaseBlobStore:
    def test_requires_url_and_key(self):
        with pytest.raises(ValueError):
            SupabaseBlobStore("", "", "techcare", UploadPolicy())

    @pytest.mark.asyncio
    async def test_store_uploads_and_returns_public_url(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"Key": "techcare/images/customer_1.png"})

        store = _store(handler)
        upload = png_upload()

        url = await store.store("customer_1", upload, BlobCategory.IMAGES)
        await store.close()

        assert url == (
            f"{BASE_URL}/storage/v1/object/public/techcare/images/customer_1.png"
        )
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/storage/v1/object/techcare/images/customer_1.png"
        assert request.headers["Authorization"] == "Bearer service-key"
        assert request.headers["x-upsert"] == "true"
        assert request.content == upload.data

    @pytest.mark.asyncio
    async def test_http_error_maps_to_storage_error(self):
        store = _store(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(BlobStorageError):
            await store.store("customer_1", png_upload(), BlobCategory.IMAGES)
        await store.close()

    @pytest.mark.asyncio
    async def test_transport_error_maps_to_storage_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        store = _store(handler)

        with pytest.raises(BlobStorageError):
            await store.store("customer_1", png_upload(), BlobCategory.IMAGES)
        await store.close()
