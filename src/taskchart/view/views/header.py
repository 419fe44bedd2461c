# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from taskchart.state import get_show_header


def header(console: Console, title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print to
        title: The view title
        sub_header: Optional second line, e.g. the selected project
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]taskchart[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[sandy_brown]{title}[/sandy_brown]", (0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[plum1]{sub_header}[/plum1]", (0, 1)))
