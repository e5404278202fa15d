"""Health check route."""

from __future__ import annotations

from collections.abc import Sequence

from litestar import Controller, get

from uploadthing_bridge.api.schemas import HealthResponse
from uploadthing_bridge.core.config import Settings


class HealthController(Controller):
    """Health check endpoints."""

    path = "/health"
    tags: Sequence[str] | None = ["Health"]

    @get("/")
    async def health_check(self, settings: Settings) -> HealthResponse:
        """Report service status and whether a credential is configured."""
        return HealthResponse(uploadthing_enabled=settings.uploadthing_configured)
