# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from taskchart.model.project import Project
from taskchart.model.task import Task
from taskchart.repository.configuration import CONFIGURATION_REPO
from taskchart.repository.source import TaskSource
from taskchart.terminal.common import fetch
from taskchart.view.views.project import projects_view
from taskchart.view.views.task import task_view, tasks_view


def projects() -> None:
    """List projects with their task counts and date spans."""
    console = Console()
    config = CONFIGURATION_REPO.get_config()

    async def query(source: TaskSource) -> list[Project]:
        return await source.get_projects()

    projects_view(console, fetch(console, query), config["timezone"])


def tasks(
    project_id: Annotated[int, typer.Argument(help="ID of the project")],
) -> None:
    """List the tasks of a project."""
    console = Console()
    config = CONFIGURATION_REPO.get_config()

    async def query(source: TaskSource) -> tuple[Project, list[Task]]:
        project = await source.get_project(project_id)
        return project, await source.get_project_tasks(project_id)

    project, project_tasks = fetch(console, query)
    tasks_view(console, project, project_tasks, config["timezone"])


def task(
    project_id: Annotated[int, typer.Argument(help="ID of the project")],
    task_id: Annotated[int, typer.Argument(help="ID of the task")],
) -> None:
    """Show a single task of a project."""
    console = Console()
    config = CONFIGURATION_REPO.get_config()

    async def query(source: TaskSource) -> tuple[Project, Task]:
        project = await source.get_project(project_id)
        return project, await source.get_project_task(project_id, task_id)

    project, project_task = fetch(console, query)
    task_view(console, project, project_task, config["timezone"])
