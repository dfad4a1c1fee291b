"""Blob store writing to the local filesystem."""

import asyncio
import logging
from pathlib import Path

from techcare_identity.infrastructure.storage.blob_store import (
    BlobCategory,
    BlobStorageError,
    BlobStore,
    FileUpload,
)
from techcare_identity.infrastructure.storage.upload_policy import UploadPolicy

logger = logging.getLogger(__name__)

UPLOADS_URL_PATH = "/uploads"


class LocalBlobStore(BlobStore):
    """Stores files under ``<root>/<category>/<owner_id>.<ext>``.

    The API serves them back from ``/uploads/<category>/<file>``.
    """

    def __init__(self, root: Path, public_base_url: str, policy: UploadPolicy):
        self._root = Path(root)
        self._public_base_url = public_base_url.rstrip("/")
        self._policy = policy

    @property
    def root(self) -> Path:
        return self._root

    async def store(
        self,
        owner_id: str,
        upload: FileUpload,
        category: BlobCategory,
    ) -> str:
        extension = self._policy.validate(upload, category)
        filename = f"{owner_id}.{extension}"
        target = self._root / category.value / filename

        try:
            await asyncio.to_thread(self._write, target, upload.data)
        except OSError as e:
            logger.error("Failed to write %s: %s", target, e)
            raise BlobStorageError() from e

        logger.info("Stored %s (%d bytes)", target, upload.size)
        return f"{self._public_base_url}{UPLOADS_URL_PATH}/{category.value}/{filename}"

    def resolve(self, category: BlobCategory, filename: str) -> Path | None:
        """Return the path of a stored file, or None if it doesn't exist.

        Names that would escape the category folder resolve to None.
        """
        folder = (self._root / category.value).resolve()
        candidate = (folder / filename).resolve()
        if candidate.parent != folder or not candidate.is_file():
            return None
        return candidate

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
