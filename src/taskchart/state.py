"""Per-invocation settings from the global command line options."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from pathlib import Path
from typing import Optional

# Snapshot file replacing the API as data source, if given
_snapshot_file: ContextVar[Optional[Path]] = ContextVar("snapshot_file", default=None)
_api_url: ContextVar[Optional[str]] = ContextVar("api_url", default=None)
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_snapshot_file(value: Optional[Path]) -> None:
    _snapshot_file.set(value)


def get_snapshot_file() -> Optional[Path]:
    return _snapshot_file.get()


def set_api_url(value: Optional[str]) -> None:
    _api_url.set(value)


def get_api_url() -> Optional[str]:
    return _api_url.get()


def set_show_header(value: bool) -> None:
    """Toggle the title line printed above every view."""
    _show_header.set(value)


def get_show_header() -> bool:
    return _show_header.get()
