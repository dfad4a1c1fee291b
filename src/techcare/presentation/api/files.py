"""Conversion from FastAPI uploads to the storage layer's FileUpload."""

from typing import Optional

from fastapi import UploadFile

from techcare_identity.infrastructure.storage import FileUpload


async def read_upload(file: UploadFile) -> FileUpload:
    data = await file.read()
    return FileUpload(
        filename=file.filename or "",
        content_type=file.content_type,
        data=data,
    )


async def read_optional_upload(file: Optional[UploadFile]) -> Optional[FileUpload]:
    """Read an optional form file. A blank file input counts as absent."""
    if file is None:
        return None
    upload = await read_upload(file)
    if not upload.filename and upload.size == 0:
        return None
    return upload
