# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskchart.model.task import Task


class Project(TypedDict):
    id: int
    name: str
    task_count: int
    earliest_start_date: Optional[str]
    latest_end_date: Optional[str]
    duration_days: Optional[int]


class ProjectTasks(TypedDict):
    project: Project
    tasks: list[Task]
