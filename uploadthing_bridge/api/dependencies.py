"""Dependency injection providers for Litestar."""

from __future__ import annotations

import logging

from litestar.di import Provide
from litestar.exceptions import ServiceUnavailableException

from uploadthing_bridge.api.services.uploadthing import (
    ConfigurationError,
    UploadAdapter,
    UploadThingClient,
    resolve_settings_token,
)
from uploadthing_bridge.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Global singleton instance (created at app startup)
_uploadthing_client: UploadThingClient | None = None


# -----------------------------------------------------------------------------
# UploadThing dependencies
# -----------------------------------------------------------------------------


async def get_uploadthing_client() -> UploadThingClient:
    """Provide UploadThing client instance.

    Returns:
        Singleton UploadThing client.

    Raises:
        ServiceUnavailableException: If no credential is configured.
    """
    if _uploadthing_client is None:
        raise ServiceUnavailableException(detail="UploadThing is not configured")
    return _uploadthing_client


async def get_upload_adapter(uploadthing_client: UploadThingClient) -> UploadAdapter:
    """Provide upload adapter bound to the shared client."""
    return UploadAdapter(uploadthing_client)


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------


def provide_settings() -> Settings:
    """Provide settings instance.

    Returns:
        Application settings.
    """
    return get_settings()


# -----------------------------------------------------------------------------
# Lifecycle management
# -----------------------------------------------------------------------------


async def init_services(settings: Settings) -> None:
    """Initialize service singletons.

    Called during application startup. A missing or invalid credential is
    logged and leaves provider-backed endpoints unavailable.

    Args:
        settings: Application settings.
    """
    global _uploadthing_client

    if not settings.uploadthing_configured:
        logger.warning("UploadThing not configured - upload and delete endpoints will be unavailable")
        return

    try:
        token = resolve_settings_token(settings)
    except ConfigurationError as e:
        logger.error(f"UploadThing credentials rejected: {e.message}")
        return

    _uploadthing_client = UploadThingClient(
        token,
        api_url=settings.uploadthing_api_url,
        timeout=settings.uploadthing_timeout,
    )
    await _uploadthing_client.connect()


async def shutdown_services() -> None:
    """Cleanup service resources.

    Called during application shutdown.
    """
    global _uploadthing_client

    if _uploadthing_client is not None:
        await _uploadthing_client.close()
        _uploadthing_client = None


# Dependency providers for Litestar
dependencies = {
    "settings": Provide(provide_settings, sync_to_thread=False),
    "uploadthing_client": Provide(get_uploadthing_client),
    "upload_adapter": Provide(get_upload_adapter),
}
