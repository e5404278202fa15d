"""Upload adapter: local file to UploadThing, normalized result."""

from __future__ import annotations

import logging
from typing import Any

import anyio
import msgspec

from .base import FileStorageClient
from .exceptions import IoError, ValidationError
from .schemas import (
    FileCategory,
    OperationFailure,
    UploadFileResponse,
    UploadRequest,
    UploadResult,
    UploadSuccess,
)
from .urls import build_file_url

logger = logging.getLogger(__name__)


class UploadAdapter:
    """Uploads caller files and maps provider replies to one result shape."""

    def __init__(self, client: FileStorageClient) -> None:
        """Initialize upload adapter.

        Args:
            client: Provider client authenticated with the resolved token.
        """
        self._client = client

    async def _read_file(self, file_path: str) -> bytes:
        """Read file bytes.

        Raises:
            IoError: If the file cannot be read.
        """
        try:
            return await anyio.Path(file_path).read_bytes()
        except OSError as e:
            raise IoError(f"Cannot read file {file_path}: {e.strerror or e}", cause=e) from e

    async def upload_bytes(
        self,
        data: bytes,
        *,
        name: str,
        content_type: str,
        custom_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> UploadFileResponse:
        """Upload an in-memory buffer and return the provider outcome."""
        logger.info(f"Uploading {name} ({len(data)} bytes, {content_type})")
        response = await self._client.upload_file(
            data,
            name=name,
            content_type=content_type,
            custom_id=custom_id,
            metadata=metadata,
        )
        logger.debug(f"UploadThing response: {msgspec.json.encode(response).decode()}")
        return response

    async def upload(self, request: UploadRequest) -> UploadResult:
        """Upload a local file and normalize the outcome.

        Raises:
            ValidationError: If a required request field is missing.
            IoError: If the file cannot be read.
        """
        if missing := request.missing_fields():
            raise ValidationError(f"Missing required arguments: {', '.join(missing)}")

        file_path = str(request.file_path)
        filename = str(request.original_filename)
        file_type = str(request.file_type)

        data = await self._read_file(file_path)
        mime_type = FileCategory.mime_type_for(file_type, filename)

        response = await self.upload_bytes(
            data,
            name=filename,
            content_type=mime_type,
            custom_id=request.custom_id,
        )

        if response.error is not None:
            logger.error(f"UploadThing rejected {filename}: {response.error.message}")
            return OperationFailure.from_message(
                response.error.message or "Upload failed",
                code=response.error.code,
            )

        uploaded = response.data
        if uploaded is None:
            return OperationFailure.from_message("Upload failed: No data in response")

        return UploadSuccess(
            url=uploaded.url or build_file_url(uploaded.key),
            file_key=uploaded.key,
            field=str(request.field),
            file_name=filename,
            file_size=len(data),
            file_type=file_type,
        )
