"""Delete adapter: batch delete on UploadThing, normalized result.

The provider has answered ``deleteFiles`` with several shapes over time, so
the raw payload is decoded into one ``DeleteResponse`` variant as soon as it
arrives and only that variant is inspected afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .base import FileStorageClient
from .exceptions import ValidationError
from .schemas import (
    DeleteAcknowledged,
    DeleteBoolean,
    DeleteMissing,
    DeletePerItem,
    DeleteResponse,
    DeleteResult,
    DeleteUnrecognized,
)

logger = logging.getLogger(__name__)


def _item_succeeded(item: Any) -> bool:
    if item is True:
        return True
    return isinstance(item, dict) and bool(item.get("success"))


def decode_delete_response(payload: Any) -> DeleteResponse:
    """Classify a raw ``deleteFiles`` payload."""
    if isinstance(payload, dict) and "success" in payload:
        count = payload.get("deletedCount")
        return DeleteAcknowledged(
            success=bool(payload["success"]),
            deleted_count=count if isinstance(count, int) and not isinstance(count, bool) else None,
        )
    if isinstance(payload, list):
        return DeletePerItem(results=tuple(_item_succeeded(item) for item in payload))
    if isinstance(payload, bool):
        return DeleteBoolean(value=payload)
    if payload is None or (not isinstance(payload, dict) and not payload):
        return DeleteMissing()
    return DeleteUnrecognized(payload=payload)


def normalize_delete_response(keys: Sequence[str], response: DeleteResponse) -> DeleteResult:
    """Map a decoded response onto per-key outcomes."""
    deleted: list[str] = []
    failed: list[str] = []

    if isinstance(response, DeleteAcknowledged):
        if response.success:
            deleted.extend(keys)
            if response.deleted_count:
                logger.info(f"Successfully deleted {response.deleted_count} files from UploadThing")
            else:
                # Zero count still counts as deleted
                logger.warning(
                    f"UploadThing returned success but deletedCount is {response.deleted_count or 0}. "
                    "Files may not exist or were already deleted."
                )
        else:
            failed.extend(keys)
            logger.warning("Delete operation returned success: false")
    elif isinstance(response, DeletePerItem):
        for index, key in enumerate(keys):
            if index < len(response.results) and response.results[index]:
                deleted.append(key)
            else:
                failed.append(key)
    elif isinstance(response, DeleteBoolean):
        (deleted if response.value else failed).extend(keys)
    elif isinstance(response, DeleteMissing):
        logger.error("No result returned from deleteFiles")
        failed.extend(keys)
    else:
        # TODO: drop the permissive default once the current deleteFiles contract is confirmed
        logger.warning(f"Unknown result format: {type(response.payload).__name__}, assuming success")
        deleted.extend(keys)

    success = bool(deleted) and not failed
    message = (
        f"Successfully deleted {len(deleted)} file(s)"
        if success
        else f"Failed to delete {len(failed)} file(s)"
    )

    return DeleteResult(
        success=success,
        message=message,
        deleted_files=deleted or None,
        failed_files=failed or None,
    )


class DeleteAdapter:
    """Deletes caller files and maps provider replies to one result shape."""

    def __init__(self, client: FileStorageClient) -> None:
        self._client = client

    async def delete(self, keys: Sequence[str]) -> DeleteResult:
        """Delete files by key.

        Raises:
            ValidationError: If no keys are given.
            ProviderError: If the provider call fails.
        """
        if not keys:
            raise ValidationError("No file keys provided")

        logger.info(f"Attempting to delete {len(keys)} file(s): {', '.join(keys)}")
        payload = await self._client.delete_files(keys)
        logger.info(f"UploadThing deleteFiles result: {payload!r}")

        return normalize_delete_response(keys, decode_delete_response(payload))
