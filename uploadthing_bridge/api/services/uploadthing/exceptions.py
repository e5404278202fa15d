"""UploadThing bridge exceptions."""

from __future__ import annotations


class UploadThingError(Exception):
    """Base exception for bridge operations."""

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.code = code


class ConfigurationError(UploadThingError):
    """Raised when credential material is missing or invalid."""


class ValidationError(UploadThingError):
    """Raised when a request is missing required fields."""


class IoError(UploadThingError):
    """Raised when a local file cannot be read."""


class ProviderError(UploadThingError):
    """Raised when the UploadThing API call fails or returns an error."""
