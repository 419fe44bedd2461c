# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "taskchart"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    api_base_url: str
    request_timeout_seconds: float
    row_height: int
    left_column_width: int
    timezone: str
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "api_base_url": "http://localhost:4500",
        "request_timeout_seconds": 10.0,
        "row_height": 36,
        "left_column_width": 40,
        "timezone": "UTC",
        "show_header": True,
        "log_level": "WARNING",
    }
