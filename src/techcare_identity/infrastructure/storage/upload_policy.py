"""Single validation policy for image and document uploads."""

from dataclasses import dataclass, field

from techcare_identity.infrastructure.storage.blob_store import (
    BlobCategory,
    FileUpload,
    UploadValidationError,
)

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_IMAGE_EXTENSION = "png"

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "webp"})
DOCUMENT_EXTENSIONS = frozenset({"pdf", "doc", "docx", "txt", "rtf"})


@dataclass(frozen=True)
class UploadPolicy:
    """Accept/reject rules shared by every upload path.

    Images must declare an ``image/*`` content type and use an image
    extension. Documents must use a document extension. Both are limited to
    ``max_bytes``.
    """

    max_bytes: int = DEFAULT_MAX_BYTES
    image_extensions: frozenset[str] = field(default=IMAGE_EXTENSIONS)
    document_extensions: frozenset[str] = field(default=DOCUMENT_EXTENSIONS)

    def validate(self, upload: FileUpload, category: BlobCategory) -> str:
        """Check an upload and return the extension it will be stored with.

        Raises
        ------
        UploadValidationError
            If the file is empty, too large, or of a disallowed type
        """
        if upload.size == 0:
            raise UploadValidationError("File is empty")

        if upload.size > self.max_bytes:
            limit_mb = self.max_bytes // (1024 * 1024)
            raise UploadValidationError(f"File size must be less than {limit_mb}MB")

        if category == BlobCategory.IMAGES:
            return self._validate_image(upload)
        return self._validate_document(upload)

    def _validate_image(self, upload: FileUpload) -> str:
        content_type = (upload.content_type or "").lower()
        if not content_type.startswith("image/"):
            raise UploadValidationError("File must be an image")

        extension = upload.extension or DEFAULT_IMAGE_EXTENSION
        if extension not in self.image_extensions:
            allowed = ", ".join(sorted(self.image_extensions))
            raise UploadValidationError(f"Invalid image format. Allowed: {allowed}")
        return extension

    def _validate_document(self, upload: FileUpload) -> str:
        extension = upload.extension
        if extension not in self.document_extensions:
            allowed = ", ".join(sorted(self.document_extensions))
            raise UploadValidationError(
                f"Invalid document format. Allowed: {allowed}",
            )
        return extension
