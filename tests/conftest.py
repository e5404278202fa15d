"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from uploadthing_bridge.api.services.uploadthing import (
    TokenPayload,
    UploadThingClient,
    encode_token,
)
from uploadthing_bridge.core.config import Settings, reset_settings

UPLOADTHING_ENV_VARS = (
    "UPLOADTHING_SECRET",
    "UPLOADTHING_API_SECRET",
    "UPLOADTHING_APP_ID",
    "UPLOADTHING_REGIONS",
    "UPLOADTHING_API_URL",
    "UPLOADTHING_TIMEOUT",
    "CORS_ORIGIN",
    "MAX_UPLOAD_SIZE_MB",
    "PORT",
    "API_HOST",
    "API_PORT",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate every test from the developer's environment and .env file."""
    for name in UPLOADTHING_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def token_payload() -> TokenPayload:
    """Provide a complete token payload."""
    return TokenPayload(
        api_key="sk_live_test_key",
        app_id="testapp123",
        regions=["fra1", "iad1"],
    )


@pytest.fixture
def encoded_token(token_payload: TokenPayload) -> str:
    """Provide an encoded token."""
    return encode_token(token_payload)


@pytest.fixture
def settings() -> Settings:
    """Provide test settings with a raw API key."""
    return Settings(
        uploadthing_secret="sk_live_test_key",
        uploadthing_app_id="testapp123",
        debug=True,
    )


@pytest.fixture
def mock_client() -> AsyncMock:
    """Create mock UploadThing client."""
    return AsyncMock(spec=UploadThingClient)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a small file to upload."""
    path = tmp_path / "roof.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"x" * 120)
    return path
