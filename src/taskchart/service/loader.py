# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Optional

from taskchart.model.project import Project, ProjectTasks
from taskchart.repository.source import TaskSource
from taskchart.service.snapshot import RequestSequencer

logger = logging.getLogger(__name__)


def select_default_project(
    projects: list[Project], current: Optional[int] = None
) -> Optional[int]:
    """Keep the current selection, otherwise fall back to the first project."""
    if current is not None:
        return current
    if projects:
        return projects[0]["id"]
    return None


async def load_all_projects(
    source: TaskSource, sequencer: RequestSequencer
) -> Optional[list[ProjectTasks]]:
    """
    Fetch every project and, concurrently, each project's tasks.

    Returns None when a newer load started while this one was in flight, so a
    stale result is never applied. Errors from a stale load are dropped for
    the same reason; errors from the current load propagate.
    """
    ticket = sequencer.begin()
    try:
        projects = await source.get_projects()
        task_lists = await asyncio.gather(
            *(source.get_project_tasks(project["id"]) for project in projects)
        )
    except Exception:
        if not sequencer.is_current(ticket):
            logger.debug(f"discarding failure of superseded load {ticket}")
            return None
        raise

    if not sequencer.is_current(ticket):
        logger.debug(f"discarding result of superseded load {ticket}")
        return None

    return [
        {"project": project, "tasks": tasks}
        for project, tasks in zip(projects, task_lists)
    ]
