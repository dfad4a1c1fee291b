"""File storage for profile images and certification documents."""

from techcare_identity.infrastructure.storage.blob_store import (
    BlobCategory,
    BlobStorageError,
    BlobStore,
    FileUpload,
    UploadValidationError,
)
from techcare_identity.infrastructure.storage.local_blob_store import (
    UPLOADS_URL_PATH,
    LocalBlobStore,
)
from techcare_identity.infrastructure.storage.supabase_blob_store import (
    SupabaseBlobStore,
)
from techcare_identity.infrastructure.storage.upload_policy import UploadPolicy

__all__ = [
    "UPLOADS_URL_PATH",
    "BlobCategory",
    "BlobStorageError",
    "BlobStore",
    "FileUpload",
    "LocalBlobStore",
    "SupabaseBlobStore",
    "UploadPolicy",
    "UploadValidationError",
]
