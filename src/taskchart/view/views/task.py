# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from taskchart.color import status_color
from taskchart.model.project import Project, ProjectTasks
from taskchart.model.task import Task
from taskchart.time import date_value_to_display_str
from taskchart.view.views.header import header


def _tasks_table(tasks: list[Task], tz: str) -> Table:
    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("id", justify="right")
    tasks_table.add_column("task")
    tasks_table.add_column("start")
    tasks_table.add_column("due")
    tasks_table.add_column("status")

    for task in tasks:
        color = status_color(task["status"])
        tasks_table.add_row(
            str(task["id"]),
            task["name"],
            date_value_to_display_str(task["start_date"], tz),
            date_value_to_display_str(task["due_date"], tz),
            f"[{color}]{task['status']}[/{color}]",
        )
    return tasks_table


def _project_summary(project: Project, tz: str) -> str:
    start = date_value_to_display_str(project["earliest_start_date"], tz)
    end = date_value_to_display_str(project["latest_end_date"], tz)
    return f"{project['task_count']} tasks • Start {start} • End {end}"


def tasks_view(
    console: Console, project: Project, tasks: list[Task], tz: str = "UTC"
) -> None:
    header(console, "tasks", f"{project['name']}: {_project_summary(project, tz)}")

    if not tasks:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    console.print(_tasks_table(tasks, tz))


def all_projects_view(
    console: Console, groups: list[ProjectTasks], tz: str = "UTC"
) -> None:
    """Every project followed by its own task list."""
    header(console, "all projects and tasks")

    if not groups:
        console.print("\n[dim]No projects to display[/dim]\n")
        return

    for group in groups:
        project = group["project"]
        console.print(
            f"\n[bold]{project['name']}[/bold] [dim]({len(group['tasks'])} tasks)[/dim]"
        )
        console.print(f"[dim]{_project_summary(project, tz)}[/dim]")
        if group["tasks"]:
            console.print(_tasks_table(group["tasks"], tz))
        else:
            console.print("[dim]No tasks[/dim]")


def task_view(console: Console, project: Project, task: Task, tz: str = "UTC") -> None:
    header(console, "task", project["name"])

    color = status_color(task["status"])
    parent = task["parent_task_id"]
    depends_on = ", ".join(str(task_id) for task_id in task["depends_on"])

    task_table = Table(box=box.SIMPLE, show_header=False)
    task_table.add_column("field", style="bold")
    task_table.add_column("value")
    task_table.add_row("id", str(task["id"]))
    task_table.add_row("task", task["name"])
    task_table.add_row("status", f"[{color}]{task['status']}[/{color}]")
    task_table.add_row("parent", str(parent) if parent is not None else "")
    task_table.add_row("depends on", depends_on)
    task_table.add_row("start", date_value_to_display_str(task["start_date"], tz))
    task_table.add_row("due", date_value_to_display_str(task["due_date"], tz))

    console.print(task_table)
