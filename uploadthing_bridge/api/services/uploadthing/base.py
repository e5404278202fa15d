"""Provider client protocol definition."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .schemas import UploadFileResponse


@runtime_checkable
class FileStorageClient(Protocol):
    """Protocol for the remote file-storage client used by the adapters.

    Mirrors the two server-side SDK operations the bridge relies on.
    """

    async def upload_file(
        self,
        data: bytes,
        *,
        name: str,
        content_type: str,
        custom_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> UploadFileResponse:
        """Upload a single file.

        Args:
            data: Raw file bytes.
            name: Filename to store.
            content_type: MIME type of the file.
            custom_id: Optional caller-side identifier.
            metadata: Optional JSON metadata stored with the file.

        Returns:
            Upload outcome. Failures are reported in ``error``, not raised.
        """
        ...

    async def delete_files(
        self,
        keys: Sequence[str],
    ) -> Any:
        """Delete files by key in one batch call.

        Args:
            keys: File keys to delete.

        Returns:
            The provider's raw response payload.

        Raises:
            ProviderError: If the call fails.
        """
        ...

    async def close(self) -> None:
        """Close any open connections."""
        ...
