# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from pendulum.tz.exceptions import InvalidTimezone
from rich.console import Console
from rich.table import Table

from taskchart import configuration
from taskchart.repository.configuration import CONFIGURATION_REPO
from taskchart.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _config_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("api_base_url", config["api_base_url"])
    table.add_row("request_timeout_seconds", str(config["request_timeout_seconds"]))
    table.add_row("row_height", str(config["row_height"]))
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row("timezone", config["timezone"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_config_table(CONFIGURATION_REPO.get_config()))
    console.print(f"[dim]{configuration.APP_CONFIG_PATH}[/dim]")


@app.command("set, s")
def set(
    api_base_url: Annotated[
        Optional[str],
        typer.Option("--api-base-url", help="Base URL of the project API"),
    ] = None,
    request_timeout_seconds: Annotated[
        Optional[float],
        typer.Option(
            "--request-timeout", min=0.1, help="Request timeout in seconds"
        ),
    ] = None,
    row_height: Annotated[
        Optional[int],
        typer.Option("--row-height", min=1, help="Row height in pixels"),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width", min=8, help="Width of the task outline column"
        ),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", help="Timezone for dates and axis labels"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show view headers"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None and log_level.upper() not in (
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
    ):
        raise typer.BadParameter(f"Unknown log level: {log_level}")

    if timezone is not None:
        try:
            pendulum.timezone(timezone)
        except (InvalidTimezone, ValueError):
            raise typer.BadParameter(f"Unknown timezone: {timezone}")

    CONFIGURATION_REPO.update_config(
        api_base_url=api_base_url,
        request_timeout_seconds=request_timeout_seconds,
        row_height=row_height,
        left_column_width=left_column_width,
        timezone=timezone,
        show_header=show_header,
        log_level=log_level,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        _config_table(CONFIGURATION_REPO.get_config(), title="Updated Configuration")
    )
