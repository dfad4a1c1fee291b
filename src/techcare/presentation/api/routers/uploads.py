"""Serves files written by the local blob store."""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from techcare.domain.shared.exceptions import EntityNotFoundError, ErrorCode
from techcare.presentation.api.dependencies import BlobStoreDep
from techcare_identity.infrastructure.storage import (
    UPLOADS_URL_PATH,
    BlobCategory,
    LocalBlobStore,
)

router = APIRouter(prefix=UPLOADS_URL_PATH, tags=["uploads"])


class StoredFileNotFoundError(EntityNotFoundError):
    def __init__(self, category: str, filename: str):
        super().__init__(
            "File not found",
            ErrorCode.FILE_NOT_FOUND,
            details={"category": category, "filename": filename},
        )


@router.get("/{category}/{filename}", summary="Download an uploaded file")
async def get_upload(category: str, filename: str, store: BlobStoreDep) -> FileResponse:
    """Only the local backend serves files itself; remote stores return public URLs."""
    try:
        blob_category = BlobCategory(category)
    except ValueError as e:
        raise StoredFileNotFoundError(category, filename) from e

    path = (
        store.resolve(blob_category, filename)
        if isinstance(store, LocalBlobStore)
        else None
    )
    if path is None:
        raise StoredFileNotFoundError(category, filename)
    return FileResponse(path)
