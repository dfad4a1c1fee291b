"""Blob store interface and the types shared by its implementations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Optional

from techcare.domain.shared.exceptions import (
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)


class BlobCategory(str, Enum):
    """Top-level folder a stored file lives in."""

    IMAGES = "images"
    DOCUMENTS = "documents"


@dataclass(frozen=True)
class FileUpload:
    """An uploaded file held in memory."""

    filename: str
    content_type: Optional[str]
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        """Lower-case extension without the dot, or an empty string."""
        return PurePath(self.filename or "").suffix.lstrip(".").lower()


class UploadValidationError(ValidationError):
    """Raised when an upload is empty, too large, or of the wrong type."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_UPLOAD)


class BlobStorageError(ExternalServiceError):
    """Raised when the storage backend fails to persist a file."""

    def __init__(self, message: str = "Failed to store file") -> None:
        super().__init__(message, ErrorCode.STORAGE_FAILED)


class BlobStore(ABC):
    """Stores a file under an owner key and returns a retrievable URL."""

    @abstractmethod
    async def store(
        self,
        owner_id: str,
        upload: FileUpload,
        category: BlobCategory,
    ) -> str:
        """Validate and persist an upload.

        Parameters
        ----------
        owner_id
            Stable key for the owning record (used as the file name stem)
        upload
            The file to store
        category
            IMAGES or DOCUMENTS

        Returns
        -------
        Public URL of the stored file

        Raises
        ------
        UploadValidationError
            If the upload fails the upload policy
        BlobStorageError
            If the backend cannot persist the file
        """
