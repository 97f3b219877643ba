# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from workboard import configuration
from workboard.template.configuration import get_configuration_template
from workboard.template.team import get_unassigned_member_template


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config: configuration.Configuration = get_configuration_template()
        configuration.APP_CONFIG_PATH.write_text(
            dump(config, Dumper=Dumper, sort_keys=False)
        )


def __ensure_data_files() -> None:
    if not configuration.DATA_WORK_PACKAGES_PATH.is_file():
        configuration.DATA_WORK_PACKAGES_PATH.touch()
        work_packages: dict[str, Any] = {"work_packages": []}
        configuration.DATA_WORK_PACKAGES_PATH.write_text(
            dump(work_packages, Dumper=Dumper)
        )
    if not configuration.DATA_TEAM_PATH.is_file():
        configuration.DATA_TEAM_PATH.touch()
        team: dict[str, Any] = {"team": [get_unassigned_member_template()]}
        configuration.DATA_TEAM_PATH.write_text(
            dump(team, Dumper=Dumper, allow_unicode=True)
        )
