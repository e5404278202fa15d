"""UploadThing token resolution.

A token is base64 of compact JSON ``{"apiKey", "appId", "regions"}``. Callers
may configure either a ready-made token or a raw API key plus app id; both
end up as a token here. Region order is failover priority and is kept as
given.
"""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import msgspec

from .exceptions import ConfigurationError
from .schemas import TokenPayload

if TYPE_CHECKING:
    from uploadthing_bridge.core.config import Settings

logger = logging.getLogger(__name__)

# Seattle, then Virginia
DEFAULT_REGIONS = ("sea1", "iad1")

_token_decoder = msgspec.json.Decoder(TokenPayload)
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def decode_token(value: str) -> TokenPayload | None:
    """Parse an encoded token.

    Returns:
        The token payload, or None if ``value`` is not a complete token.
    """
    # Accept the URL-safe alphabet as well as the standard one
    normalized = value.translate(_URLSAFE_TO_STANDARD)
    try:
        raw = base64.b64decode(normalized + "=" * (-len(normalized) % 4))
        payload = _token_decoder.decode(raw)
    except (binascii.Error, ValueError, msgspec.DecodeError):
        return None

    if not (payload.api_key and payload.app_id and payload.regions):
        return None
    return payload


def encode_token(payload: TokenPayload) -> str:
    """Encode a token payload."""
    return base64.b64encode(msgspec.json.encode(payload)).decode("ascii")


def split_regions(value: str | None) -> list[str]:
    """Split a comma-separated region list, keeping order and duplicates."""
    if not value or not value.strip():
        return []
    return [region.strip() for region in value.split(",")]


def resolve_token(
    secret: str | None,
    app_id: str | None = None,
    regions_override: Sequence[str] | None = None,
    *,
    regions_env: str | None = None,
) -> str:
    """Derive an UploadThing token from configured credential material.

    Args:
        secret: Encoded token or raw API key.
        app_id: App ID, required when ``secret`` is a raw key.
        regions_override: Explicit region list, highest priority.
        regions_env: Comma-separated region list from configuration.

    Returns:
        ``secret`` unchanged if it already is a token, else a new token.

    Raises:
        ConfigurationError: If the secret is missing, or a raw key is given
            without an app id.
    """
    if not secret:
        raise ConfigurationError(
            "UPLOADTHING_SECRET or UPLOADTHING_API_SECRET environment variable is required"
        )

    if decode_token(secret) is not None:
        return secret

    if not app_id:
        raise ConfigurationError(
            "UPLOADTHING_APP_ID is required when using a raw API secret (sk_live_...). "
            "Get your App ID from the UploadThing dashboard."
        )

    if regions_override:
        regions = list(regions_override)
    else:
        regions = split_regions(regions_env) or list(DEFAULT_REGIONS)

    logger.info("Constructed token from API key and App ID")
    return encode_token(TokenPayload(api_key=secret, app_id=app_id, regions=regions))


def resolve_settings_token(
    settings: Settings,
    regions_override: Sequence[str] | None = None,
) -> str:
    """Resolve the token from the application settings record."""
    return resolve_token(
        settings.uploadthing_secret,
        settings.uploadthing_app_id,
        regions_override,
        regions_env=settings.regions_env,
    )
