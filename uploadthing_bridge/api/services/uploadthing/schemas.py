"""UploadThing bridge DTOs using msgspec."""

from __future__ import annotations

from enum import Enum
from typing import Any

import msgspec

DEFAULT_MIME_TYPE = "application/octet-stream"

IMAGE_MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}


class FileCategory(str, Enum):
    """Upload categories understood by the caller."""

    IMAGE = "image"
    PDF = "pdf"

    @classmethod
    def mime_type_for(cls, file_type: str, filename: str) -> str:
        """Get MIME type from the upload category and original filename.

        Images are typed by extension and fall back to JPEG; unknown
        categories are sent as an opaque byte stream.
        """
        if file_type == cls.IMAGE.value:
            ext = filename.rsplit(".", 1)[-1].lower()
            return IMAGE_MIME_TYPES.get(ext, "image/jpeg")
        if file_type == cls.PDF.value:
            return "application/pdf"
        return DEFAULT_MIME_TYPE


# -----------------------------------------------------------------------------
# Credentials
# -----------------------------------------------------------------------------


class TokenPayload(msgspec.Struct, kw_only=True, rename="camel"):
    """Decoded UploadThing token: {apiKey, appId, regions}."""

    api_key: str
    app_id: str
    regions: list[str]


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------


class UploadRequest(msgspec.Struct, kw_only=True):
    """Request to upload a local file."""

    file_path: str | None = None
    field: str | None = None
    file_type: str | None = None
    original_filename: str | None = None
    custom_id: str | None = None  # Correlation id, e.g. a booking reference

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or blank."""
        required = {
            "filePath": self.file_path,
            "field": self.field,
            "fileType": self.file_type,
            "originalFilename": self.original_filename,
        }
        return [name for name, value in required.items() if not value]


# -----------------------------------------------------------------------------
# Provider responses
# -----------------------------------------------------------------------------


class UploadedFile(msgspec.Struct, kw_only=True, rename="camel", omit_defaults=True):
    """File record returned by the provider after an upload."""

    key: str | None = None
    url: str | None = None
    name: str | None = None
    size: int | None = None
    type: str | None = None
    custom_id: str | None = None
    file_hash: str | None = None


class UploadErrorInfo(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Error record returned by the provider for a failed upload."""

    message: str
    code: str | None = None


class UploadFileResponse(msgspec.Struct, kw_only=True):
    """Per-file upload outcome: exactly one of data or error is set."""

    data: UploadedFile | None = None
    error: UploadErrorInfo | None = None


class DeleteAcknowledged(msgspec.Struct, frozen=True):
    """Object response carrying a success flag."""

    success: bool
    deleted_count: int | None = None


class DeletePerItem(msgspec.Struct, frozen=True):
    """Array response, index-aligned with the submitted keys."""

    results: tuple[bool, ...]


class DeleteBoolean(msgspec.Struct, frozen=True):
    """Plain boolean response."""

    value: bool


class DeleteUnrecognized(msgspec.Struct, frozen=True):
    """Payload of a shape the bridge does not know."""

    payload: Any


class DeleteMissing(msgspec.Struct, frozen=True):
    """No payload at all."""


DeleteResponse = DeleteAcknowledged | DeletePerItem | DeleteBoolean | DeleteUnrecognized | DeleteMissing


# -----------------------------------------------------------------------------
# Normalized results
# -----------------------------------------------------------------------------


class UploadSuccess(msgspec.Struct, kw_only=True, rename="camel"):
    """Normalized result of a successful upload."""

    success: bool = True
    message: str = "File uploaded successfully"
    url: str | None
    file_key: str | None
    field: str
    file_name: str
    file_size: int
    file_type: str


class OperationFailure(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Normalized result of any failed operation."""

    success: bool
    error: str
    code: str | None = None

    @classmethod
    def from_message(cls, error: str, code: str | None = None) -> OperationFailure:
        """Build a failure result."""
        return cls(success=False, error=error, code=code)


UploadResult = UploadSuccess | OperationFailure


class DeleteResult(msgspec.Struct, kw_only=True, rename="camel"):
    """Normalized result of a batch delete."""

    success: bool
    message: str
    deleted_files: list[str] | None = None
    failed_files: list[str] | None = None
