# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from taskchart.model.project import Project
from taskchart.time import EMPTY_DATE_PLACEHOLDER, date_value_to_display_str
from taskchart.view.views.header import header


def projects_view(console: Console, projects: list[Project], tz: str = "UTC") -> None:
    header(console, "projects")

    if not projects:
        console.print("\n[dim]No projects to display[/dim]\n")
        return

    projects_table = Table(box=box.SIMPLE)
    projects_table.add_column("id", justify="right")
    projects_table.add_column("project")
    projects_table.add_column("tasks", justify="right")
    projects_table.add_column("start")
    projects_table.add_column("end")
    projects_table.add_column("duration")

    for project in projects:
        duration = project["duration_days"]
        projects_table.add_row(
            str(project["id"]),
            project["name"],
            str(project["task_count"]),
            date_value_to_display_str(project["earliest_start_date"], tz),
            date_value_to_display_str(project["latest_end_date"], tz),
            f"{duration} days" if duration is not None else EMPTY_DATE_PLACEHOLDER,
        )

    console.print(projects_table)
