# SPDX-License-Identifier: MIT

from typing import TypedDict


class DependencyLine(TypedDict):
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
