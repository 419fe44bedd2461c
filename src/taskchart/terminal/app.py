# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from taskchart import state as app_state
from taskchart.repository.configuration import CONFIGURATION_REPO
from taskchart.terminal import configuration
from taskchart.terminal.custom_typer import OrderedAliasedTyperGroup
from taskchart.terminal.project import projects, task, tasks
from taskchart.terminal.view import all_projects, gantt

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="taskchart - Hierarchical gantt charts of project tasks",
    no_args_is_help=True,
)
app.command(name="projects, p")(projects)
app.command(name="tasks, t")(tasks)
app.command(name="task, tk")(task)
app.command(name="gantt, g")(gantt)
app.command(name="all, a")(all_projects)
app.add_typer(configuration.app, name="config, c", help="View and update settings")


@app.callback()
def main_callback(
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            help="Read projects and tasks from a YAML/JSON snapshot instead of the API",
        ),
    ] = None,
    api_url: Annotated[
        Optional[str],
        typer.Option("--api-url", help="Override the configured API base URL"),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    taskchart - Hierarchical gantt charts of project tasks

    Global options that apply to all commands.
    """
    config = CONFIGURATION_REPO.get_config()
    level = logging.DEBUG if verbose else getattr(logging, config["log_level"], logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app_state.set_snapshot_file(file)
    app_state.set_api_url(api_url)
    if no_header:
        app_state.set_show_header(False)


def run() -> None:
    app()
