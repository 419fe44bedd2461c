# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskchart.model.task import Task
from taskchart.model.timeline import Bar, TimelineRange
from taskchart.service.timeline import range_duration_ms, resolve_interval
from taskchart.time import datetime_to_millis

ROW_HEIGHT = 36
MIN_BAR_WIDTH_PERCENT = 1.0


class GeometryProjector:
    """
    Maps points in time and row indices onto the rendering surface.

    Holds only its inputs. A resized surface gets a new projector.
    """

    def __init__(
        self,
        timeline_range: TimelineRange,
        width: float,
        row_height: float = ROW_HEIGHT,
    ) -> None:
        self.timeline_range = timeline_range
        self.width = max(width, 0)
        self.row_height = row_height
        self._duration = range_duration_ms(timeline_range)

    def x_for(self, moment: pendulum.DateTime) -> float:
        offset = datetime_to_millis(moment) - self.timeline_range["start_ms"]
        return offset / self._duration * self.width

    def y_for(self, row_index: int) -> float:
        return row_index * self.row_height + self.row_height / 2

    def percent_for(self, moment: pendulum.DateTime) -> float:
        offset = datetime_to_millis(moment) - self.timeline_range["start_ms"]
        return offset / self._duration * 100

    def bar_for(self, task: Task, row_index: int) -> Optional[Bar]:
        """
        Bar placement as percentages of the range. The width never drops
        below MIN_BAR_WIDTH_PERCENT so zero-length tasks stay visible.
        """
        interval = resolve_interval(task)
        if interval is None:
            return None
        start, end = interval
        left = self.percent_for(start)
        span = self.percent_for(end) - left
        return {
            "task_id": task["id"],
            "row_index": row_index,
            "left_percent": left,
            "width_percent": max(span, MIN_BAR_WIDTH_PERCENT),
        }
