"""Main entry point for running the UploadThing bridge API server."""

from __future__ import annotations

import click
import uvicorn

from uploadthing_bridge.core.config import get_settings

APP_FACTORY = "uploadthing_bridge.api.app:create_app"


@click.command()
@click.option("--host", default=None, help="Bind address (defaults to API_HOST)")
@click.option("--port", type=int, default=None, help="Bind port (defaults to PORT)")
@click.option("--reload/--no-reload", default=None, help="Reload on code changes (defaults to DEBUG)")
def main(host: str | None, port: int | None, reload: bool | None) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()

    if not settings.uploadthing_configured:
        click.echo(
            "UPLOADTHING_SECRET is not set: upload and delete endpoints will answer 503",
            err=True,
        )

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=settings.debug if reload is None else reload,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
