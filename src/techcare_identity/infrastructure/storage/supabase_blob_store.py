"""Blob store backed by Supabase Storage."""

import logging

import httpx

from techcare_identity.infrastructure.storage.blob_store import (
    BlobCategory,
    BlobStorageError,
    BlobStore,
    FileUpload,
)
from techcare_identity.infrastructure.storage.upload_policy import UploadPolicy

logger = logging.getLogger(__name__)


class SupabaseBlobStore(BlobStore):
    """Uploads files to a Supabase Storage bucket over its REST API.

    Objects are written to ``<bucket>/<category>/<owner_id>.<ext>`` and
    addressed through the bucket's public URL.
    """

    def __init__(  # NOQA: PLR0913
        self,
        base_url: str,
        service_key: str,
        bucket: str,
        policy: UploadPolicy,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not base_url or not service_key:
            msg = "Supabase URL and service key are required"
            raise ValueError(msg)
        self._base_url = base_url.rstrip("/")
        self._service_key = service_key
        self._bucket = bucket
        self._policy = policy
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={
                    "Authorization": f"Bearer {self._service_key}",
                    "apikey": self._service_key,
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def store(
        self,
        owner_id: str,
        upload: FileUpload,
        category: BlobCategory,
    ) -> str:
        extension = self._policy.validate(upload, category)
        object_name = f"{category.value}/{owner_id}.{extension}"

        try:
            client = await self._get_client()
            response = await client.post(
                f"/storage/v1/object/{self._bucket}/{object_name}",
                content=upload.data,
                headers={
                    "Content-Type": upload.content_type or "application/octet-stream",
                    "x-upsert": "true",
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Supabase upload of %s failed with %d: %s",
                object_name,
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            raise BlobStorageError() from e
        except httpx.HTTPError as e:
            logger.error("Supabase upload of %s failed: %s", object_name, e)
            raise BlobStorageError() from e

        logger.info("Uploaded %s to bucket %s", object_name, self._bucket)
        return self.public_url(object_name)

    def public_url(self, object_name: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{self._bucket}/{object_name}"
