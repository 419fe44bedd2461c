# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Any, Optional

import pendulum

logger = logging.getLogger(__name__)

EMPTY_DATE_PLACEHOLDER = "—"


def resolve_datetime(value: Any) -> Optional[pendulum.DateTime]:
    """
    Resolve a nullable date-like value into a point in time.

    Accepts ISO 8601 strings, datetime/date objects and pendulum values.
    Anything that does not describe a calendar date, including malformed
    strings, bare times and durations, resolves to None. Naive values are
    taken as UTC.
    """
    if value is None:
        return None

    if isinstance(value, str):
        text = value.strip()
        # "now" parses to the current time, which is not a fixed date
        if not text or text.lower() == "now":
            return None
        try:
            parsed = pendulum.parse(text, exact=True)
        except (ValueError, TypeError, OverflowError):
            logger.debug(f"unparseable date value {value!r}")
            return None
        return _calendar_datetime(parsed)

    return _calendar_datetime(value)


def _calendar_datetime(value: Any) -> Optional[pendulum.DateTime]:
    # datetime subclasses date, so order matters
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz="UTC")
        if isinstance(value, pendulum.DateTime):
            return value
        return pendulum.instance(value)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="UTC")
    return None


def datetime_to_millis(value: pendulum.DateTime) -> int:
    return round(value.timestamp() * 1000)


def datetime_from_millis(millis: float, tz: str = "UTC") -> pendulum.DateTime:
    return pendulum.from_timestamp(millis / 1000, tz=tz)


def datetime_to_tick_label(value: pendulum.DateTime, tz: str = "UTC") -> str:
    """Short month and day, e.g. 'Jan 5'."""
    return value.in_tz(tz).format("MMM D")


def datetime_to_display_date_str(value: pendulum.DateTime, tz: str = "UTC") -> str:
    return value.in_tz(tz).format("YYYY-MM-DD")


def date_value_to_display_str(value: Any, tz: str = "UTC") -> str:
    """
    Format a raw date field for display.

    Empty values show a placeholder and values that cannot be resolved are
    shown as given.
    """
    if value is None or value == "":
        return EMPTY_DATE_PLACEHOLDER
    resolved = resolve_datetime(value)
    if resolved is None:
        return str(value)
    return datetime_to_display_date_str(resolved, tz)
