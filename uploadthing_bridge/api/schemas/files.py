"""Response schemas for the HTTP facade."""

from __future__ import annotations

from typing import Any

import msgspec


class HealthResponse(msgspec.Struct, kw_only=True, rename="camel"):
    """Health check response."""

    status: str = "ok"
    service: str = "uploadthing-service"
    uploadthing_enabled: bool


class UploadedFileData(msgspec.Struct, kw_only=True):
    """Stored file details."""

    key: str | None
    url: str | None
    name: str | None
    size: int
    type: str


class UploadResponse(msgspec.Struct, kw_only=True):
    """Response for a successful upload."""

    success: bool = True
    data: UploadedFileData


class DeleteResponse(msgspec.Struct, kw_only=True):
    """Response for a delete, carrying the raw provider payload."""

    success: bool = True
    message: str = "File deleted successfully"
    data: Any = None


class FileInfoData(msgspec.Struct, kw_only=True):
    """Key and public URL of a file."""

    key: str
    url: str | None


class FileInfoResponse(msgspec.Struct, kw_only=True):
    """Response for a file info lookup."""

    success: bool = True
    data: FileInfoData


class FileListResponse(msgspec.Struct, kw_only=True):
    """Response for the file listing stub."""

    success: bool = True
    message: str = "UploadThing has no listing API; track file keys on the caller side"
    data: list[Any] = msgspec.field(default_factory=list)


class ErrorResponse(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Error response."""

    error: str
    message: str | None = None
