"""API schemas module."""

from .files import (
    DeleteResponse,
    ErrorResponse,
    FileInfoData,
    FileInfoResponse,
    FileListResponse,
    HealthResponse,
    UploadedFileData,
    UploadResponse,
)

__all__ = [
    "DeleteResponse",
    "ErrorResponse",
    "FileInfoData",
    "FileInfoResponse",
    "FileListResponse",
    "HealthResponse",
    "UploadedFileData",
    "UploadResponse",
]
