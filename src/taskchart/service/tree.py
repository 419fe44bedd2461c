# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from typing import Optional

from taskchart.model.task import Task, TaskId
from taskchart.model.task_row import NUMBER_SEPARATOR, TaskRow
from taskchart.service.order import sort_siblings

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    owner: Optional[TaskId]
    siblings: list[Task]
    depth: int
    prefix: str
    position: int = 0
    emitted: int = 0


def group_by_parent(tasks: list[Task]) -> dict[Optional[TaskId], list[Task]]:
    """Bucket tasks by parent id and sort each bucket. Roots live under None."""
    buckets: dict[Optional[TaskId], list[Task]] = {}
    for task in tasks:
        buckets.setdefault(task["parent_task_id"], []).append(task)
    return {parent: sort_siblings(children) for parent, children in buckets.items()}


def build_task_rows(tasks: list[Task]) -> list[TaskRow]:
    """
    Produce the ordered outline for a flat task collection.

    Rows come out in pre-order: every parent precedes its descendants and
    each sibling group follows the sibling sort order. Numbers are the 1-based
    sibling positions along the path joined by a dot, e.g. "2.1.3".

    Tasks whose parent is not reachable from a root are never visited and so
    do not appear. A child whose id is already on its own ancestor path is
    skipped to break cycles, and does not take up a sibling number.

    Args:
        tasks: Every task of one project, in any order

    Returns:
        The ordered list of rows
    """
    buckets = group_by_parent(tasks)
    rows: list[TaskRow] = []

    # ids of the tasks whose children are currently being walked
    ancestors: set[TaskId] = set()
    stack = [_Frame(owner=None, siblings=buckets.get(None, []), depth=0, prefix="")]

    while stack:
        frame = stack[-1]
        if frame.position >= len(frame.siblings):
            stack.pop()
            if frame.owner is not None:
                ancestors.discard(frame.owner)
            continue

        task = frame.siblings[frame.position]
        frame.position += 1

        if task["id"] in ancestors:
            logger.debug(f"skipping task {task['id']}: it is its own ancestor")
            continue

        frame.emitted += 1
        number = f"{frame.prefix}{frame.emitted}"
        rows.append({"task": task, "depth": frame.depth, "number": number})

        children = buckets.get(task["id"])
        if children:
            ancestors.add(task["id"])
            stack.append(
                _Frame(
                    owner=task["id"],
                    siblings=children,
                    depth=frame.depth + 1,
                    prefix=number + NUMBER_SEPARATOR,
                )
            )

    excluded = len(tasks) - len(rows)
    if excluded > 0:
        logger.debug(f"{excluded} task(s) not reachable from a root were left out")

    return rows
