# SPDX-License-Identifier: MIT

import math

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from taskchart.color import AXIS_COLOR, DEPENDENCY_COLOR, status_color
from taskchart.model.gantt import GanttLayout
from taskchart.model.project import Project
from taskchart.model.task_row import TaskRow
from taskchart.model.timeline import Bar, Tick
from taskchart.view.views.header import header

BAR_CHAR = "█"
AXIS_CHAR = "─"
TICK_CHAR = "┬"
INDENT = "  "


def gantt_view(
    console: Console,
    project: Project,
    layout: GanttLayout,
    left_column_width: int = 40,
) -> None:
    """
    Display the task outline next to its timeline bars.

    The layout must have been built with a width equal to the number of
    character columns available for the timeline, so pixel offsets map one
    to one onto columns. Rows without a schedule keep their outline entry and
    get an empty timeline.

    Args:
        console: Console to print to
        project: The project being charted
        layout: The computed gantt layout
        left_column_width: Width of the outline column
    """
    header(console, "gantt", project["name"])

    columns = int(layout["width"])
    console.print(f"\n[bold]{layout['range_label']}[/bold]\n")

    if not layout["rows"]:
        console.print("[dim]No tasks to display[/dim]\n")
        return

    chart_elements: list[Text] = []
    if columns > 0 and layout["ticks"]:
        chart_elements.extend(_build_axis_rows(layout["ticks"], columns, left_column_width))

    bars_by_row = {bar["row_index"]: bar for bar in layout["bars"]}
    for index, row in enumerate(layout["rows"]):
        chart_elements.append(
            _build_task_row(row, bars_by_row.get(index), columns, left_column_width)
        )

    dependency_rows = _build_dependency_rows(layout)
    if dependency_rows:
        chart_elements.append(Text())
        chart_elements.append(Text("dependencies", style="bold"))
        chart_elements.extend(dependency_rows)

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))


def _build_axis_rows(
    ticks: list[Tick], columns: int, left_column_width: int
) -> list[Text]:
    """
    Build the tick label row and the axis line below it.

    Labels start at their tick column; the last one is pulled left so it ends
    inside the chart. A label that would overlap the previous one is dropped.
    """
    labels = [" "] * columns
    axis = [AXIS_CHAR] * columns
    next_free = 0

    for tick in ticks:
        column = min(int(tick["percent"] / 100 * columns), columns - 1)
        axis[column] = TICK_CHAR

        label = tick["label"]
        label_start = min(column, columns - len(label))
        if label_start < next_free or label_start < 0:
            continue
        for offset, char in enumerate(label):
            labels[label_start + offset] = char
        next_free = label_start + len(label) + 1

    label_row = Text(" " * left_column_width)
    label_row.append("".join(labels), style=AXIS_COLOR)
    axis_row = Text(AXIS_CHAR * left_column_width, style=AXIS_COLOR)
    axis_row.append("".join(axis), style=AXIS_COLOR)
    return [label_row, axis_row]


def _format_left_column(row: TaskRow, left_column_width: int) -> tuple[str, str]:
    """
    Format the outline text for a row: indentation by depth, the hierarchical
    number, then the task name, padded or truncated to the column width.

    Returns:
        Tuple of (formatted_text, style)
    """
    task = row["task"]
    left_col = f"{INDENT * row['depth']}{row['number']} {task['name']}"

    if len(left_col) > left_column_width:
        left_col = left_col[: left_column_width - 3] + "..."
    else:
        left_col = left_col.ljust(left_column_width)

    return left_col, status_color(task["status"])


def _bar_columns(bar: Bar, columns: int) -> tuple[int, int]:
    start = math.floor(bar["left_percent"] / 100 * columns)
    end = math.ceil((bar["left_percent"] + bar["width_percent"]) / 100 * columns)
    start = max(0, min(start, columns - 1))
    end = max(start + 1, min(end, columns))
    return start, end


def _build_task_row(
    row: TaskRow, bar: Bar | None, columns: int, left_column_width: int
) -> Text:
    left_col, style = _format_left_column(row, left_column_width)
    line = Text()
    line.append(left_col, style=style)

    if columns <= 0:
        return line

    if bar is None:
        # Unscheduled: keep the row, leave the timeline empty
        line.append(" " * columns)
        return line

    start, end = _bar_columns(bar, columns)
    line.append(" " * start)
    line.append(BAR_CHAR * (end - start), style=style)
    line.append(" " * (columns - end))
    return line


def _build_dependency_rows(layout: GanttLayout) -> list[Text]:
    rows = layout["rows"]
    row_height = layout["row_height"]
    dependency_rows = []

    for dependency_line in layout["dependency_lines"]:
        from_row = rows[int(dependency_line["y1"] // row_height)]
        to_row = rows[int(dependency_line["y2"] // row_height)]
        line = Text("  ")
        line.append(from_row["number"], style="bold")
        line.append(" ─▶ ", style=DEPENDENCY_COLOR)
        line.append(to_row["number"], style="bold")
        line.append(
            f"  {from_row['task']['name']} → {to_row['task']['name']}"
            f" (col {dependency_line['x1']:.0f} → {dependency_line['x2']:.0f})",
            style="dim",
        )
        dependency_rows.append(line)

    return dependency_rows
