"""UploadThing HTTP client for server-side API communication."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from .credentials import decode_token
from .exceptions import ConfigurationError, ProviderError
from .schemas import TokenPayload, UploadedFile, UploadErrorInfo, UploadFileResponse

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.uploadthing.com"
SDK_VERSION = "7.7.4"

_STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "FORBIDDEN",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    413: "TOO_LARGE",
    429: "TOO_MANY_REQUESTS",
}


def _error_from_response(response: httpx.Response, default_code: str | None = None) -> UploadErrorInfo:
    """Build an error record from a failed API response."""
    message = response.text or f"HTTP {response.status_code}"
    code = default_code or _STATUS_CODES.get(response.status_code, "INTERNAL_SERVER_ERROR")
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = str(body.get("error") or body.get("message") or message)
        code = str(body.get("code") or code)

    return UploadErrorInfo(message=message, code=code)


class UploadThingClient:
    """Async HTTP client for the UploadThing REST API.

    Handles the two server-side operations the bridge needs:
    - Single-file upload (prepare, then ingest)
    - Batch delete by file key
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        payload = decode_token(token)
        if payload is None:
            raise ConfigurationError("UploadThing token is malformed")
        self._token = payload
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> UploadThingClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def app_id(self) -> str:
        return self._token.app_id

    @property
    def regions(self) -> list[str]:
        return self._token.regions

    @property
    def token(self) -> TokenPayload:
        return self._token

    async def connect(self) -> None:
        """Initialize HTTP client connection."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                timeout=httpx.Timeout(self._timeout, connect=10.0),
                headers={"x-uploadthing-version": SDK_VERSION},
                transport=self._transport,
            )
            logger.info(
                f"UploadThing client connected to {self._api_url} "
                f"(app={self.app_id}, regions={','.join(self.regions)})"
            )

    async def close(self) -> None:
        """Close HTTP client connection."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("UploadThing client disconnected")

    @property
    def client(self) -> httpx.AsyncClient:
        """Get HTTP client, raising if not connected."""
        if self._client is None:
            raise ProviderError("Client not connected. Call connect() first.")
        return self._client

    def _api_headers(self) -> dict[str, str]:
        # The API key is only sent to the API host, never to ingest servers.
        return {"x-uploadthing-api-key": self._token.api_key}

    async def upload_file(
        self,
        data: bytes,
        *,
        name: str,
        content_type: str,
        custom_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> UploadFileResponse:
        """Upload a single file to UploadThing.

        Args:
            data: Raw file bytes.
            name: Filename to store.
            content_type: MIME type of the file.
            custom_id: Optional caller-side identifier.
            metadata: Optional JSON metadata stored with the file.

        Returns:
            Upload outcome with either ``data`` or ``error`` set.
        """
        body: dict[str, Any] = {
            "fileName": name,
            "fileSize": len(data),
            "fileType": content_type,
            "customId": custom_id,
            "contentDisposition": "inline",
            "acl": "public-read",
        }
        if metadata:
            body["metadata"] = metadata

        try:
            prepared = await self.client.post(
                "/v7/prepareUpload",
                json=body,
                headers=self._api_headers(),
            )

            if not prepared.is_success:
                logger.error(f"UploadThing prepareUpload failed: {prepared.status_code} - {prepared.text}")
                return UploadFileResponse(error=_error_from_response(prepared))

            presigned = prepared.json()
            key = presigned["key"]
            ingest_url = presigned["url"]

            ingested = await self.client.put(
                ingest_url,
                files={"file": (name, data, content_type)},
                headers={"Range": "bytes=0-"},
            )

            if not ingested.is_success:
                logger.error(f"UploadThing ingest failed for {key}: {ingested.status_code} - {ingested.text}")
                return UploadFileResponse(error=_error_from_response(ingested, "UPLOAD_FAILED"))

            stored = ingested.json() if ingested.content else {}
            if not isinstance(stored, dict):
                stored = {}
            logger.debug(f"File uploaded to UploadThing: {key}")

            return UploadFileResponse(
                data=UploadedFile(
                    key=key,
                    url=stored.get("ufsUrl") or stored.get("url"),
                    name=name,
                    size=len(data),
                    type=content_type,
                    custom_id=custom_id,
                    file_hash=stored.get("fileHash"),
                )
            )

        except httpx.RequestError as e:
            logger.error(f"UploadThing connection error: {e}")
            return UploadFileResponse(
                error=UploadErrorInfo(
                    message=f"Failed to connect to UploadThing: {e}",
                    code="INTERNAL_CLIENT_ERROR",
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Unexpected UploadThing upload response: {e}")
            return UploadFileResponse(
                error=UploadErrorInfo(
                    message=f"Invalid upload response: {e}",
                    code="INTERNAL_CLIENT_ERROR",
                )
            )

    async def delete_files(self, keys: Sequence[str]) -> Any:
        """Delete files from UploadThing in one batch call.

        Args:
            keys: File keys to delete.

        Returns:
            The raw JSON payload, or None if the reply had no body.

        Raises:
            ProviderError: If the API returns an error or is unreachable.
        """
        try:
            response = await self.client.post(
                "/v6/deleteFiles",
                json={"fileKeys": list(keys)},
                headers=self._api_headers(),
            )
        except httpx.RequestError as e:
            logger.error(f"UploadThing connection error: {e}")
            raise ProviderError(f"Failed to connect to UploadThing: {e}", cause=e) from e

        if not response.is_success:
            error = _error_from_response(response)
            logger.error(f"UploadThing deleteFiles failed: {response.status_code} - {response.text}")
            raise ProviderError(error.message, code=error.code)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid delete response: {e}", cause=e) from e
