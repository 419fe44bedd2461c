# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskchart.model.dependency_line import DependencyLine
from taskchart.model.task_row import TaskRow
from taskchart.model.timeline import Bar, Tick, TimelineRange


class GanttLayout(TypedDict):
    rows: list[TaskRow]
    timeline_range: Optional[TimelineRange]
    range_label: str
    ticks: list[Tick]
    bars: list[Bar]
    dependency_lines: list[DependencyLine]
    width: float
    row_height: float
