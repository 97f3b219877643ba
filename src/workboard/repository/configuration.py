# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from workboard import configuration
from workboard.model.granularity_type import GranularityType
from workboard.model.sort_key import ResponsibleSortOrder, SortKey
from workboard.template.configuration import get_configuration_template


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is empty"
            )

        # Back-fill settings added after the file was written
        template: dict[str, Any] = dict(get_configuration_template())
        for key, value in template.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        locale: Optional[str] = None,
        default_granularity: Optional[GranularityType] = None,
        kanban_columns: Optional[list[str]] = None,
        default_kanban_sort: Optional[SortKey] = None,
        responsible_sort_order: Optional[ResponsibleSortOrder] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if locale is not None:
            self.config["locale"] = locale
        if default_granularity is not None:
            self.config["default_granularity"] = default_granularity
        if kanban_columns is not None:
            self.config["kanban_columns"] = kanban_columns
        if default_kanban_sort is not None:
            self.config["default_kanban_sort"] = default_kanban_sort
        if responsible_sort_order is not None:
            self.config["responsible_sort_order"] = responsible_sort_order
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
