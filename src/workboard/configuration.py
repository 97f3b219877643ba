# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from workboard.model.granularity_type import GranularityType
from workboard.model.priority import PriorityDefinition
from workboard.model.sort_key import ResponsibleSortOrder, SortKey

APP_NAME = "workboard"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_WORK_PACKAGES_PATH: Path = DATA_PATH / "work_packages.yaml"
DATA_TEAM_PATH: Path = DATA_PATH / "team.yaml"


class Configuration(TypedDict):
    locale: str
    default_granularity: GranularityType
    kanban_columns: list[str]
    default_kanban_sort: SortKey
    responsible_sort_order: ResponsibleSortOrder
    priorities: list[PriorityDefinition]
    data_path: Optional[str]


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_WORK_PACKAGES_PATH, DATA_TEAM_PATH

    DATA_PATH = data_path
    DATA_WORK_PACKAGES_PATH = DATA_PATH / "work_packages.yaml"
    DATA_TEAM_PATH = DATA_PATH / "team.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
