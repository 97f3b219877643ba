# SPDX-License-Identifier: MIT

import atexit

from workboard.repository.configuration import CONFIGURATION_REPO
from workboard.repository.team import TEAM_REPO
from workboard.repository.work_package import WORK_PACKAGE_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    TEAM_REPO.flush()
    WORK_PACKAGE_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
