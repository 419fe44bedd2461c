# SPDX-License-Identifier: MIT

from typing import Any, Optional, cast

from taskchart.model.project import Project
from taskchart.model.task import TASK_STATUSES, Task, TaskStatus


def _field(raw: dict[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    if snake in raw:
        return raw[snake]
    return raw.get(camel, default)


def _status(value: Any) -> TaskStatus:
    status = str(value if value is not None else "planned")
    normalized = status.replace("_", " ").replace("-", " ")
    if normalized in TASK_STATUSES:
        return cast(TaskStatus, normalized)
    return cast(TaskStatus, status)


def task_from_raw(raw: dict[str, Any], project_id: Optional[int] = None) -> Task:
    """Build a Task from API or file data using camelCase or snake_case keys."""
    depends_on = _field(raw, "depends_on", "dependsOn") or []
    raw_project_id = _field(raw, "project_id", "projectId", project_id)
    return {
        "id": raw["id"],
        "project_id": raw_project_id,
        "name": raw.get("name") or "",
        "status": _status(raw.get("status")),
        "parent_task_id": _field(raw, "parent_task_id", "parentTaskId"),
        "depends_on": list(depends_on),
        "start_date": _field(raw, "start_date", "startDate"),
        "due_date": _field(raw, "due_date", "dueDate"),
    }


def project_from_raw(raw: dict[str, Any]) -> Project:
    return {
        "id": raw["id"],
        "name": raw.get("name") or "",
        "task_count": _field(raw, "task_count", "taskCount", 0) or 0,
        "earliest_start_date": _field(
            raw, "earliest_start_date", "earliestStartDate"
        ),
        "latest_end_date": _field(raw, "latest_end_date", "latestEndDate"),
        "duration_days": _field(raw, "duration_days", "durationDays"),
    }
