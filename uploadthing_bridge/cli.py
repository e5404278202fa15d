"""Command-line scripts called by the backend.

Each script prints exactly one JSON object on stdout and exits 0 on success,
1 on any failure. Diagnostics are logged to stderr so stdout stays parseable.

Positional values are passed through untouched: a filename such as
``-final.pdf`` is data, not an option, and trailing extra values are ignored.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import Any

import click
import msgspec

from uploadthing_bridge.api.services.uploadthing import (
    DeleteAdapter,
    DeleteResult,
    OperationFailure,
    UploadAdapter,
    UploadRequest,
    UploadResult,
    UploadThingClient,
    UploadThingError,
    resolve_settings_token,
)
from uploadthing_bridge.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PASSTHROUGH_CONTEXT = {"ignore_unknown_options": True, "allow_extra_args": True}


def configure_logging(debug: bool = False) -> None:
    """Send this package's log records to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("uploadthing_bridge")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    package_logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)


def emit(result: msgspec.Struct) -> None:
    """Write a result object to stdout as one line of JSON."""
    click.echo(msgspec.json.encode(result).decode())


class JsonResultCommand(click.Command):
    """Click command that reports usage errors as a JSON failure on stdout."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            emit(OperationFailure.from_message(e.format_message(), code="USAGE_ERROR"))
            ctx.exit(1)


def _client_for(settings: Settings) -> UploadThingClient:
    return UploadThingClient(
        resolve_settings_token(settings),
        api_url=settings.uploadthing_api_url,
        timeout=settings.uploadthing_timeout,
    )


async def run_upload(settings: Settings, request: UploadRequest) -> UploadResult:
    """Resolve credentials and upload one local file."""
    async with _client_for(settings) as client:
        return await UploadAdapter(client).upload(request)


async def run_delete(settings: Settings, keys: Sequence[str]) -> DeleteResult:
    """Resolve credentials and delete files by key."""
    async with _client_for(settings) as client:
        return await DeleteAdapter(client).delete(keys)


def _failure_from(error: Exception) -> OperationFailure:
    if isinstance(error, UploadThingError):
        logger.error(f"{type(error).__name__}: {error.message}")
        return OperationFailure.from_message(error.message, code=error.code)
    logger.exception("Unexpected error")
    return OperationFailure.from_message(str(error) or "Unknown error occurred")


def _upload_request(args: Sequence[str], custom_id: str | None) -> UploadRequest:
    values: list[Any] = [*args[:4], None, None, None, None]
    if len(args) > 4:
        logger.warning(f"Ignoring {len(args) - 4} extra argument(s)")
    return UploadRequest(
        file_path=values[0],
        field=values[1],
        file_type=values[2],
        original_filename=values[3],
        custom_id=custom_id,
    )


@click.command(cls=JsonResultCommand, context_settings=PASSTHROUGH_CONTEXT)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--custom-id", default=None, help="Correlation id stored with the file")
def upload(args: tuple[str, ...], custom_id: str | None) -> None:
    """Upload a local file to UploadThing and print the result as JSON.

    ARGS are FILE_PATH FIELD FILE_TYPE ORIGINAL_FILENAME.
    """
    result: UploadResult
    try:
        settings = get_settings()
        configure_logging(settings.debug)
        result = asyncio.run(run_upload(settings, _upload_request(args, custom_id)))
    except Exception as e:
        result = _failure_from(e)

    emit(result)
    sys.exit(0 if result.success else 1)


@click.command(cls=JsonResultCommand, context_settings=PASSTHROUGH_CONTEXT)
@click.argument("file_keys", nargs=-1, type=click.UNPROCESSED)
def delete(file_keys: tuple[str, ...]) -> None:
    """Delete FILE_KEYS from UploadThing and print the result as JSON."""
    result: DeleteResult | OperationFailure
    try:
        settings = get_settings()
        configure_logging(settings.debug)
        result = asyncio.run(run_delete(settings, list(file_keys)))
    except Exception as e:
        result = _failure_from(e)

    emit(result)
    sys.exit(0 if result.success else 1)
