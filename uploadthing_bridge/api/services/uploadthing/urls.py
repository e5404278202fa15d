"""UploadThing file URL helpers."""

from __future__ import annotations

import re

LEGACY_FILE_URL_BASE = "https://utfs.io/f/"

# https://utfs.io/f/<key> or https://<app-id>.ufs.sh/f/<key>
_FILE_URL_PATTERN = re.compile(r"https?://(?:utfs\.io|.*\.ufs\.sh)/f/([^/?]+)")


def build_file_url(key: str | None, app_id: str | None = None) -> str | None:
    """Build the public URL for a file key.

    Uses the app-scoped ``ufs.sh`` host when an app id is known.
    """
    if not key or not key.strip():
        return None
    if app_id and app_id.strip():
        return f"https://{app_id}.ufs.sh/f/{key}"
    return f"{LEGACY_FILE_URL_BASE}{key}"


def is_uploadthing_url(url: str | None) -> bool:
    """Check whether ``url`` is an UploadThing file URL."""
    if not url or not url.strip():
        return False
    return _FILE_URL_PATTERN.fullmatch(url) is not None


def extract_file_key(url: str | None) -> str | None:
    """Extract the file key from an UploadThing file URL."""
    if not url or not url.strip():
        return None
    match = _FILE_URL_PATTERN.search(url)
    return match.group(1) if match else None
