# SPDX-License-Identifier: MIT

import datetime
from typing import Literal, Optional, TypeAlias, TypedDict

TaskId: TypeAlias = int

TaskStatus: TypeAlias = Literal["planned", "in progress", "completed", "cancelled"]

TASK_STATUSES: tuple[TaskStatus, ...] = (
    "planned",
    "in progress",
    "completed",
    "cancelled",
)

DateLike: TypeAlias = str | datetime.date | datetime.datetime


class Task(TypedDict):
    id: TaskId
    project_id: int
    name: str
    status: TaskStatus
    parent_task_id: Optional[TaskId]
    depends_on: list[TaskId]
    start_date: Optional[DateLike]
    due_date: Optional[DateLike]
