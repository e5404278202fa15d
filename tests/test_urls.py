"""Tests for UploadThing URL helpers."""

import pytest

from uploadthing_bridge.api.services.uploadthing import (
    build_file_url,
    extract_file_key,
    is_uploadthing_url,
)


class TestBuildFileUrl:
    """Tests for URL building."""

    def test_legacy_host(self) -> None:
        """Test keys without app id use utfs.io."""
        assert build_file_url("abc") == "https://utfs.io/f/abc"

    def test_app_scoped_host(self) -> None:
        """Test an app id selects the ufs.sh host."""
        assert build_file_url("abc", "app1") == "https://app1.ufs.sh/f/abc"

    @pytest.mark.parametrize("key", [None, "", "   "])
    def test_blank_key(self, key: str | None) -> None:
        """Test blank keys produce no URL."""
        assert build_file_url(key) is None


class TestUrlParsing:
    """Tests for URL validation and key extraction."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://utfs.io/f/abc123",
            "http://utfs.io/f/abc123",
            "https://app1.ufs.sh/f/abc123",
        ],
    )
    def test_valid_urls(self, url: str) -> None:
        """Test UploadThing file URLs are recognized."""
        assert is_uploadthing_url(url)
        assert extract_file_key(url) == "abc123"

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "https://example.com/f/abc123",
            "https://utfs.io/files/abc123",
        ],
    )
    def test_invalid_urls(self, url: str | None) -> None:
        """Test other URLs are rejected."""
        assert not is_uploadthing_url(url)
        assert extract_file_key(url) is None

    def test_extract_stops_at_query(self) -> None:
        """Test the key excludes a query string."""
        url = "https://app1.ufs.sh/f/abc123?download=1"
        assert extract_file_key(url) == "abc123"
        assert not is_uploadthing_url(url)
