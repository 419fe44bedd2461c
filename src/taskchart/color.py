# SPDX-License-Identifier: MIT

from taskchart.model.task import TaskStatus

STATUS_COLORS: dict[TaskStatus, str] = {
    "planned": "cyan",
    "in progress": "dark_orange",
    "completed": "bright_black",
    "cancelled": "red",
}

DEFAULT_STATUS_COLOR = "white"
AXIS_COLOR = "dim"
DEPENDENCY_COLOR = "magenta"


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)  # type: ignore[call-overload]
