# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from taskchart.model.project import Project
from taskchart.model.task import Task
from taskchart.repository.convert import project_from_raw, task_from_raw
from taskchart.service.timeline import compute_timeline_range
from taskchart.time import datetime_to_display_date_str

logger = logging.getLogger(__name__)


class SnapshotFileError(Exception):
    pass


class SnapshotFileRepository:
    """
    Projects and tasks read from a YAML or JSON document of the form
    {projects: [...], tasks: [...]}. When the projects list is missing it is
    derived from the project ids found on the tasks.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._projects: Optional[list[Project]] = None
        self._tasks: Optional[list[Task]] = None

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    @property
    def projects(self) -> list[Project]:
        if self._projects is None:
            self.__load_data()
        if self._projects is None:
            raise ValueError()
        return self._projects

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise SnapshotFileError(f"Snapshot file not found: {self.path}")

        try:
            raw: Any = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise SnapshotFileError(f"Cannot parse {self.path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise SnapshotFileError(
                f"{self.path} must contain a mapping with 'projects' and 'tasks'"
            )

        try:
            self._tasks = [task_from_raw(item) for item in raw.get("tasks") or []]
            raw_projects = raw.get("projects")
            if raw_projects is None:
                self._projects = self.__derive_projects(self._tasks)
            else:
                self._projects = [project_from_raw(item) for item in raw_projects]
        except (KeyError, TypeError, AttributeError) as e:
            self._tasks = None
            self._projects = None
            raise SnapshotFileError(f"Malformed entry in {self.path}: {e}") from e

        unassigned = [task["id"] for task in self._tasks if task["project_id"] is None]
        if unassigned:
            logger.debug(
                f"{len(unassigned)} task(s) without a project id left out: {unassigned}"
            )

        logger.debug(
            f"loaded {len(self._projects)} project(s) and {len(self._tasks)} task(s) "
            f"from {self.path}"
        )

    def __derive_projects(self, tasks: list[Task]) -> list[Project]:
        project_ids = sorted(
            {task["project_id"] for task in tasks if task["project_id"] is not None}
        )
        projects: list[Project] = []
        for project_id in project_ids:
            project_tasks = [task for task in tasks if task["project_id"] == project_id]
            timeline_range = compute_timeline_range(project_tasks)
            earliest = None
            latest = None
            duration_days = None
            if timeline_range is not None:
                earliest = datetime_to_display_date_str(timeline_range["start"])
                latest = datetime_to_display_date_str(timeline_range["end"])
                duration_days = timeline_range["start"].diff(timeline_range["end"]).in_days()
            projects.append(
                {
                    "id": project_id,
                    "name": f"Project {project_id}",
                    "task_count": len(project_tasks),
                    "earliest_start_date": earliest,
                    "latest_end_date": latest,
                    "duration_days": duration_days,
                }
            )
        return projects

    async def get_projects(self) -> list[Project]:
        return list(self.projects)

    async def get_project(self, project_id: int) -> Project:
        for project in self.projects:
            if project["id"] == project_id:
                return project
        raise SnapshotFileError(f"No project with id {project_id} in {self.path}")

    async def get_project_tasks(self, project_id: int) -> list[Task]:
        return [task for task in self.tasks if task["project_id"] == project_id]

    async def get_project_task(self, project_id: int, task_id: int) -> Task:
        for task in await self.get_project_tasks(project_id):
            if task["id"] == task_id:
                return task
        raise SnapshotFileError(
            f"No task with id {task_id} in project {project_id} of {self.path}"
        )

    async def close(self) -> None:
        pass
