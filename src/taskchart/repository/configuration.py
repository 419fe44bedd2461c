# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskchart import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw_config: Optional[dict[str, Any]] = None
        if configuration.APP_CONFIG_PATH.is_file():
            raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Back-fill keys missing from older or hand-written config files
        config = cast(dict[str, Any], configuration.get_default_configuration())
        if raw_config is not None:
            config.update(
                {key: value for key, value in raw_config.items() if key in config}
            )
        self._config = cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        api_base_url: Optional[str] = None,
        request_timeout_seconds: Optional[float] = None,
        row_height: Optional[int] = None,
        left_column_width: Optional[int] = None,
        timezone: Optional[str] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if api_base_url is not None:
            self.config["api_base_url"] = api_base_url
            self.is_dirty = True
        if request_timeout_seconds is not None:
            self.config["request_timeout_seconds"] = request_timeout_seconds
            self.is_dirty = True
        if row_height is not None:
            self.config["row_height"] = row_height
            self.is_dirty = True
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
            self.is_dirty = True
        if timezone is not None:
            self.config["timezone"] = timezone
            self.is_dirty = True
        if show_header is not None:
            self.config["show_header"] = show_header
            self.is_dirty = True
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
            self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
