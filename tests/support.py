# SPDX-License-Identifier: MIT

from typing import Optional

from taskchart.model.task import Task, TaskStatus


def make_task(
    id: int,
    name: Optional[str] = None,
    parent: Optional[int] = None,
    start: Optional[str] = None,
    due: Optional[str] = None,
    depends_on: Optional[list[int]] = None,
    status: TaskStatus = "planned",
    project_id: int = 1,
) -> Task:
    return {
        "id": id,
        "project_id": project_id,
        "name": name if name is not None else f"Task {id}",
        "status": status,
        "parent_task_id": parent,
        "depends_on": depends_on or [],
        "start_date": start,
        "due_date": due,
    }
