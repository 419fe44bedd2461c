# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from taskchart.model.gantt import GanttLayout
from taskchart.model.task import Task
from taskchart.service.gantt import build_gantt_layout
from taskchart.service.geometry import ROW_HEIGHT

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class GanttSnapshot:
    """
    Holds the latest task set, selected project and surface width, and
    rebuilds the layout whenever one of them changes.

    Each update is applied as a whole before the layout is rebuilt, so the
    layout always reflects a single consistent set of inputs.
    """

    def __init__(self, row_height: float = ROW_HEIGHT, tz: str = "UTC") -> None:
        self.row_height = row_height
        self.tz = tz
        self._tasks: list[Task] = []
        self._project_id: Optional[int] = None
        self._width: float = 0
        self._layout: Optional[GanttLayout] = None
        self.revision = 0

    @property
    def project_id(self) -> Optional[int]:
        return self._project_id

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def width(self) -> float:
        return self._width

    @property
    def layout(self) -> GanttLayout:
        if self._layout is None:
            self.__recompute()
        if self._layout is None:
            raise ValueError()
        return self._layout

    def update(
        self,
        tasks: Optional[list[Task]] = _UNSET,
        project_id: Optional[int] = _UNSET,
        width: float = _UNSET,
    ) -> GanttLayout:
        """
        Apply any subset of the three inputs.

        Switching to another project drops the current tasks unless new tasks
        arrive in the same update. The layout is rebuilt only when an input
        actually differs from the previous snapshot.
        """
        changed = False

        if project_id is not _UNSET and project_id != self._project_id:
            self._project_id = project_id
            if tasks is _UNSET:
                self._tasks = []
            changed = True

        if tasks is not _UNSET:
            new_tasks = list(tasks or [])
            if new_tasks != self._tasks:
                self._tasks = new_tasks
                changed = True

        if width is not _UNSET and width != self._width:
            self._width = width
            changed = True

        if changed or self._layout is None:
            self.__recompute()

        if self._layout is None:
            raise ValueError()
        return self._layout

    def __recompute(self) -> None:
        self._layout = build_gantt_layout(
            self._tasks, self._width, self.row_height, self.tz
        )
        self.revision += 1
        logger.debug(
            f"layout revision {self.revision}: project={self._project_id} "
            f"tasks={len(self._tasks)} width={self._width}"
        )


class RequestSequencer:
    """Hands out request tickets so only the newest response gets applied."""

    def __init__(self) -> None:
        self._latest = 0

    def begin(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest
