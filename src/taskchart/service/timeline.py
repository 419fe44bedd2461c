# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskchart.model.task import Task
from taskchart.model.timeline import Tick, TimelineRange
from taskchart.time import (
    datetime_from_millis,
    datetime_to_display_date_str,
    datetime_to_millis,
    datetime_to_tick_label,
    resolve_datetime,
)

TICK_COUNT = 4
NO_RANGE_LABEL = "No scheduled tasks"


def resolve_interval(
    task: Task,
) -> Optional[tuple[pendulum.DateTime, pendulum.DateTime]]:
    """
    The [start, end] interval of a task, or None when the start date does not
    resolve. A missing or unresolvable due date falls back to the start date.
    """
    start = resolve_datetime(task["start_date"])
    if start is None:
        return None
    due = resolve_datetime(task["due_date"])
    return start, due if due is not None else start


def compute_timeline_range(tasks: list[Task]) -> Optional[TimelineRange]:
    """
    Derive the shared time window spanning every scheduled task.

    Only tasks with a resolvable start date contribute. The end is kept at or
    after the start even when a task's due date precedes its start.

    Returns:
        The range, or None when no task contributes
    """
    intervals = [
        interval for interval in map(resolve_interval, tasks) if interval is not None
    ]
    if not intervals:
        return None

    start = min(interval[0] for interval in intervals)
    end = max(max(interval[1] for interval in intervals), start)

    return {
        "start": start,
        "end": end,
        "start_ms": datetime_to_millis(start),
        "end_ms": datetime_to_millis(end),
    }


def range_duration_ms(timeline_range: TimelineRange) -> int:
    """Duration used as a divisor, never below one millisecond."""
    return max(timeline_range["end_ms"] - timeline_range["start_ms"], 1)


def generate_ticks(
    timeline_range: Optional[TimelineRange], tz: str = "UTC"
) -> list[Tick]:
    if timeline_range is None:
        return []

    duration = range_duration_ms(timeline_range)
    ticks: list[Tick] = []
    for i in range(TICK_COUNT + 1):
        fraction = i / TICK_COUNT
        moment = datetime_from_millis(
            timeline_range["start_ms"] + duration * fraction, tz
        )
        ticks.append(
            {"label": datetime_to_tick_label(moment, tz), "percent": fraction * 100}
        )
    return ticks


def timeline_range_label(
    timeline_range: Optional[TimelineRange], tz: str = "UTC"
) -> str:
    if timeline_range is None:
        return NO_RANGE_LABEL
    start = datetime_to_display_date_str(timeline_range["start"], tz)
    end = datetime_to_display_date_str(timeline_range["end"], tz)
    return f"{start} to {end}"
