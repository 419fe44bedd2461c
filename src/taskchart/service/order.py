# SPDX-License-Identifier: MIT

import math

from taskchart.model.task import Task
from taskchart.time import datetime_to_millis, resolve_datetime


def task_sort_key(task: Task) -> tuple[float, str]:
    """
    Sibling sort key: resolved start date ascending with unscheduled tasks
    last, then name (case-sensitive) ascending.
    """
    start = resolve_datetime(task["start_date"])
    start_value = math.inf if start is None else datetime_to_millis(start)
    return (start_value, task["name"])


def sort_siblings(tasks: list[Task]) -> list[Task]:
    # sorted() is stable, exact ties keep their input order
    return sorted(tasks, key=task_sort_key)
