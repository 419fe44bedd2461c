# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console

from taskchart.model.project import Project, ProjectTasks
from taskchart.model.task import Task
from taskchart.repository.configuration import CONFIGURATION_REPO
from taskchart.repository.source import TaskSource
from taskchart.service.loader import load_all_projects, select_default_project
from taskchart.service.snapshot import GanttSnapshot, RequestSequencer
from taskchart.terminal.common import fetch
from taskchart.view.views.gantt import gantt_view
from taskchart.view.views.task import all_projects_view

logger = logging.getLogger(__name__)


def gantt(
    project_id: Annotated[
        Optional[int],
        typer.Argument(help="ID of the project (defaults to the first project)"),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            min=1,
            help="Timeline width in columns (defaults to the console width minus the outline column)",
        ),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            "-l",
            min=8,
            help="Width of the task outline column",
        ),
    ] = None,
) -> None:
    """Display a project's task outline as a gantt chart."""
    console = Console()
    config = CONFIGURATION_REPO.get_config()
    if left_column_width is None:
        left_column_width = config["left_column_width"]

    async def query(source: TaskSource) -> Optional[tuple[Project, list[Task]]]:
        selected = project_id
        if selected is None:
            selected = select_default_project(await source.get_projects())
        if selected is None:
            return None
        project = await source.get_project(selected)
        return project, await source.get_project_tasks(selected)

    result = fetch(console, query)
    if result is None:
        console.print("\n[dim]No projects to display[/dim]\n")
        return
    project, project_tasks = result

    if width is None:
        width = max(console.width - left_column_width, 0)

    snapshot = GanttSnapshot(row_height=config["row_height"], tz=config["timezone"])
    layout = snapshot.update(tasks=project_tasks, project_id=project["id"], width=width)
    logger.debug(
        f"gantt for project {project['id']}: {len(layout['rows'])} of "
        f"{len(project_tasks)} task(s) in outline"
    )

    gantt_view(console, project, layout, left_column_width)


def all_projects() -> None:
    """Load every project together with its tasks."""
    console = Console()
    config = CONFIGURATION_REPO.get_config()
    sequencer = RequestSequencer()

    async def query(source: TaskSource) -> Optional[list[ProjectTasks]]:
        return await load_all_projects(source, sequencer)

    groups = fetch(console, query)
    all_projects_view(console, groups or [], config["timezone"])
