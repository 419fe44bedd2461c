# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console

from taskchart import state as app_state
from taskchart.repository.api import ApiClient, ApiError
from taskchart.repository.configuration import CONFIGURATION_REPO
from taskchart.repository.snapshot_file import SnapshotFileError, SnapshotFileRepository
from taskchart.repository.source import TaskSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def open_source() -> TaskSource:
    """The snapshot file given on the command line, otherwise the API."""
    snapshot_file = app_state.get_snapshot_file()
    if snapshot_file is not None:
        return SnapshotFileRepository(snapshot_file)

    config = CONFIGURATION_REPO.get_config()
    base_url = app_state.get_api_url() or config["api_base_url"]
    logger.debug(f"using API at {base_url}")
    return ApiClient(base_url=base_url, timeout=config["request_timeout_seconds"])


def fetch(console: Console, query: Callable[[TaskSource], Awaitable[T]]) -> T:
    """
    Run an async query against the configured source and close it afterwards.

    Retrieval errors are reported on the console and end the command with
    exit code 1.
    """

    async def runner() -> T:
        source = open_source()
        try:
            return await query(source)
        finally:
            await source.close()

    try:
        return asyncio.run(runner())
    except (ApiError, SnapshotFileError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
