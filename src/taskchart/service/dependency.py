# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from taskchart.model.dependency_line import DependencyLine
from taskchart.model.task import TaskId
from taskchart.model.task_row import TaskRow
from taskchart.model.timeline import TimelineRange
from taskchart.service.geometry import GeometryProjector
from taskchart.service.timeline import resolve_interval

logger = logging.getLogger(__name__)


def compute_dependency_lines(
    rows: list[TaskRow],
    timeline_range: Optional[TimelineRange],
    projector: Optional[GeometryProjector],
) -> list[DependencyLine]:
    """
    Connect each dependency's end to its dependent's start.

    Lines follow row order, then each task's dependency order. A reference to
    a task that has no row, or a pair where either side has no interval,
    produces no line.
    """
    if timeline_range is None or projector is None:
        return []

    row_index_by_id: dict[TaskId, int] = {}
    for index, row in enumerate(rows):
        row_index_by_id.setdefault(row["task"]["id"], index)

    lines: list[DependencyLine] = []
    for index, row in enumerate(rows):
        task = row["task"]
        task_interval = resolve_interval(task)
        for dependency_id in task["depends_on"]:
            dependency_index = row_index_by_id.get(dependency_id)
            if dependency_index is None:
                logger.debug(f"task {task['id']} depends on unknown task {dependency_id}")
                continue

            dependency_interval = resolve_interval(rows[dependency_index]["task"])
            if task_interval is None or dependency_interval is None:
                continue

            lines.append(
                {
                    "id": f"{dependency_id}-{task['id']}",
                    "x1": projector.x_for(dependency_interval[1]),
                    "y1": projector.y_for(dependency_index),
                    "x2": projector.x_for(task_interval[0]),
                    "y2": projector.y_for(index),
                }
            )

    return lines
