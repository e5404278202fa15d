"""File API routes called by the backend.

Provides endpoints for uploading files to UploadThing, deleting them,
and building public file URLs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Annotated

from litestar import Controller, Response, delete, get, post
from litestar.datastructures import UploadFile
from litestar.enums import RequestEncodingType
from litestar.params import Body, Parameter
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from uploadthing_bridge.api.schemas import (
    DeleteResponse,
    ErrorResponse,
    FileInfoData,
    FileInfoResponse,
    FileListResponse,
    UploadedFileData,
    UploadResponse,
)
from uploadthing_bridge.api.services.uploadthing import (
    UploadAdapter,
    UploadThingClient,
    UploadThingError,
    build_file_url,
)
from uploadthing_bridge.api.services.uploadthing.schemas import DEFAULT_MIME_TYPE
from uploadthing_bridge.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class UploadForm:
    """Multipart body of an upload request."""

    file: UploadFile | None = None
    customId: str | None = None  # noqa: N815
    bookingRef: str | None = None  # noqa: N815


class FileController(Controller):
    """UploadThing file endpoints."""

    path = "/api"
    tags: Sequence[str] | None = ["Files"]

    @post("/upload", status_code=HTTP_200_OK)
    async def upload_file(
        self,
        upload_adapter: UploadAdapter,
        settings: Settings,
        data: Annotated[UploadForm, Body(media_type=RequestEncodingType.MULTI_PART)],
        user_id: Annotated[
            str | None,
            Parameter(header="x-user-id", required=False, description="Uploading user"),
        ] = None,
    ) -> Response[UploadResponse | ErrorResponse]:
        """Upload a file sent as multipart/form-data to UploadThing.

        The optional ``customId`` (or ``bookingRef``) is stored with the file.
        """
        if data.file is None:
            return Response(
                content=ErrorResponse(error="No file provided"),
                status_code=HTTP_400_BAD_REQUEST,
            )

        content = await data.file.read()
        if len(content) > settings.max_upload_size_bytes:
            return Response(
                content=ErrorResponse(
                    error="File too large",
                    message=f"Maximum size: {settings.max_upload_size_mb}MB",
                ),
                status_code=HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )

        filename = data.file.filename or "upload"
        content_type = data.file.content_type or DEFAULT_MIME_TYPE
        custom_id = data.customId or data.bookingRef or None
        uploaded_by = user_id or "backend"
        logger.info(f"Upload from {uploaded_by}: {filename} ({len(content)} bytes, customId={custom_id})")

        try:
            result = await upload_adapter.upload_bytes(
                content,
                name=filename,
                content_type=content_type,
                custom_id=custom_id,
                metadata={
                    "originalName": filename,
                    "customId": custom_id,
                    "uploadedBy": uploaded_by,
                },
            )
        except UploadThingError as e:
            logger.error(f"Upload error: {e}")
            return Response(
                content=ErrorResponse(error="Upload failed", message=e.message),
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if result.error is not None or result.data is None:
            message = result.error.message if result.error else "No data in response"
            logger.error(f"Upload error: {message}")
            return Response(
                content=ErrorResponse(error="Upload failed", message=message),
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            )

        uploaded = result.data
        return Response(
            content=UploadResponse(
                data=UploadedFileData(
                    key=uploaded.key,
                    url=uploaded.url or build_file_url(uploaded.key),
                    name=uploaded.name or filename,
                    size=len(content),
                    type=content_type,
                ),
            ),
            status_code=HTTP_200_OK,
        )

    @delete("/files/{file_key:str}", status_code=HTTP_200_OK)
    async def delete_file(
        self,
        uploadthing_client: UploadThingClient,
        file_key: str,
    ) -> Response[DeleteResponse | ErrorResponse]:
        """Delete a file by key.

        Returns the provider's raw delete payload in ``data``.
        """
        try:
            payload = await uploadthing_client.delete_files([file_key])
        except UploadThingError as e:
            logger.error(f"Delete error for {file_key}: {e}")
            return Response(
                content=ErrorResponse(error="Delete failed", message=e.message),
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(content=DeleteResponse(data=payload), status_code=HTTP_200_OK)

    @get("/files/{file_key:str}/info")
    async def get_file_info(self, settings: Settings, file_key: str) -> FileInfoResponse:
        """Build the public URL of a file without calling UploadThing."""
        url = build_file_url(file_key, settings.uploadthing_app_id or "utfs")
        return FileInfoResponse(data=FileInfoData(key=file_key, url=url))

    @get("/files")
    async def list_files(self) -> FileListResponse:
        """List files (stub: UploadThing has no listing endpoint)."""
        return FileListResponse()
