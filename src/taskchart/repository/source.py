# SPDX-License-Identifier: MIT

from typing import Protocol

from taskchart.model.project import Project
from taskchart.model.task import Task


class TaskSource(Protocol):
    async def get_projects(self) -> list[Project]: ...

    async def get_project(self, project_id: int) -> Project: ...

    async def get_project_tasks(self, project_id: int) -> list[Task]: ...

    async def get_project_task(self, project_id: int, task_id: int) -> Task: ...

    async def close(self) -> None: ...
