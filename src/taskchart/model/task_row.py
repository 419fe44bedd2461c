# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskchart.model.task import Task

NUMBER_SEPARATOR = "."


class TaskRow(TypedDict):
    task: Task
    depth: int
    number: str
