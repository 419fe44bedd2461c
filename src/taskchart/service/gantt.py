# SPDX-License-Identifier: MIT

from taskchart.model.gantt import GanttLayout
from taskchart.model.task import Task
from taskchart.model.timeline import Bar
from taskchart.service.dependency import compute_dependency_lines
from taskchart.service.geometry import ROW_HEIGHT, GeometryProjector
from taskchart.service.timeline import (
    compute_timeline_range,
    generate_ticks,
    timeline_range_label,
)
from taskchart.service.tree import build_task_rows


def build_gantt_layout(
    tasks: list[Task],
    width: float,
    row_height: float = ROW_HEIGHT,
    tz: str = "UTC",
) -> GanttLayout:
    """
    Run the whole pipeline for one task snapshot and one surface width.

    Args:
        tasks: Every task of the selected project
        width: Pixel width of the timeline surface
        row_height: Pixel height of one outline row
        tz: Timezone used for tick and range labels

    Returns:
        Render-ready rows, range, ticks, bars and dependency lines
    """
    width = max(width, 0)
    rows = build_task_rows(tasks)
    timeline_range = compute_timeline_range(tasks)

    bars: list[Bar] = []
    projector = None
    if timeline_range is not None:
        projector = GeometryProjector(timeline_range, width, row_height)
        for index, row in enumerate(rows):
            bar = projector.bar_for(row["task"], index)
            if bar is not None:
                bars.append(bar)

    return {
        "rows": rows,
        "timeline_range": timeline_range,
        "range_label": timeline_range_label(timeline_range, tz),
        "ticks": generate_ticks(timeline_range, tz),
        "bars": bars,
        "dependency_lines": compute_dependency_lines(rows, timeline_range, projector),
        "width": width,
        "row_height": row_height,
    }
