"""UploadThing service module.

Provides token resolution, the UploadThing API client, and the upload and
delete adapters that normalize provider replies.
"""

from .base import FileStorageClient
from .client import UploadThingClient
from .credentials import (
    DEFAULT_REGIONS,
    decode_token,
    encode_token,
    resolve_settings_token,
    resolve_token,
)
from .delete import DeleteAdapter, decode_delete_response, normalize_delete_response
from .exceptions import (
    ConfigurationError,
    IoError,
    ProviderError,
    UploadThingError,
    ValidationError,
)
from .schemas import (
    DeleteResult,
    FileCategory,
    OperationFailure,
    TokenPayload,
    UploadedFile,
    UploadErrorInfo,
    UploadFileResponse,
    UploadRequest,
    UploadResult,
    UploadSuccess,
)
from .upload import UploadAdapter
from .urls import build_file_url, extract_file_key, is_uploadthing_url

__all__ = [
    # Protocol
    "FileStorageClient",
    # Implementation
    "UploadThingClient",
    "UploadAdapter",
    "DeleteAdapter",
    # Credentials
    "DEFAULT_REGIONS",
    "decode_token",
    "encode_token",
    "resolve_settings_token",
    "resolve_token",
    # Normalization
    "decode_delete_response",
    "normalize_delete_response",
    # URLs
    "build_file_url",
    "extract_file_key",
    "is_uploadthing_url",
    # Schemas
    "DeleteResult",
    "FileCategory",
    "OperationFailure",
    "TokenPayload",
    "UploadedFile",
    "UploadErrorInfo",
    "UploadFileResponse",
    "UploadRequest",
    "UploadResult",
    "UploadSuccess",
    # Exceptions
    "ConfigurationError",
    "IoError",
    "ProviderError",
    "UploadThingError",
    "ValidationError",
]
