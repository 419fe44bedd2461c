# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from taskchart.model.task import TaskId


class TimelineRange(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    start_ms: int
    end_ms: int


class Tick(TypedDict):
    label: str
    percent: float


class Bar(TypedDict):
    task_id: TaskId
    row_index: int
    left_percent: float
    width_percent: float
