"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # UploadThing credentials
    uploadthing_secret: str | None = Field(
        default=None,
        validation_alias=AliasChoices("uploadthing_secret", "uploadthing_api_secret"),
        description="Encoded UploadThing token or raw API key (sk_live_...)",
    )
    uploadthing_app_id: str | None = Field(
        default=None,
        description="UploadThing app ID (required with a raw API key)",
    )
    uploadthing_regions: str | None = Field(
        default=None,
        description="Comma-separated region override, in failover order",
    )

    # UploadThing API settings
    uploadthing_api_url: str = Field(
        default="https://api.uploadthing.com",
        description="UploadThing REST API base URL",
    )
    uploadthing_timeout: float = Field(
        default=60.0,
        gt=0,
        description="HTTP client timeout in seconds",
    )

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(
        default=3001,
        validation_alias=AliasChoices("api_port", "port"),
        description="API server port",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    cors_origin: str = Field(
        default="http://localhost:8082",
        description="Single origin allowed to call the HTTP facade",
    )
    max_upload_size_mb: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum upload file size in MB",
    )

    @computed_field
    @property
    def max_upload_size_bytes(self) -> int:
        """Maximum upload size in bytes."""
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def regions_env(self) -> str | None:
        """Raw region override, or None when unset or blank."""
        if self.uploadthing_regions and self.uploadthing_regions.strip():
            return self.uploadthing_regions
        return None

    @property
    def uploadthing_configured(self) -> bool:
        """Check if an UploadThing credential is present."""
        return bool(self.uploadthing_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    get_settings.cache_clear()
