# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from workboard import configuration, time
from workboard.model.entity_id import normalize_owner_id
from workboard.model.task import Task
from workboard.model.work_package import Container
from workboard.service.flatten import flatten_work_packages
from workboard.service.validate import validate_task_dates

LOGGER = logging.getLogger(__name__)

_DATE_FIELDS = ("start_date", "end_date", "created_at")


class WorkPackageRepository:
    def __init__(self) -> None:
        self._work_packages: Optional[list[Container]] = None
        self.is_dirty = False

    @property
    def work_packages(self) -> list[Container]:
        if self._work_packages is None:
            self.__load_data()
        if self._work_packages is None:
            raise ValueError()
        return self._work_packages

    def __load_data(self) -> None:
        raw_data = load(
            configuration.DATA_WORK_PACKAGES_PATH.read_text(), Loader=Loader
        )
        if raw_data is None or "work_packages" not in raw_data:
            raise ValueError(
                f"{configuration.DATA_WORK_PACKAGES_PATH} has no 'work_packages' list"
            )

        self._work_packages = [
            self.__convert_container_for_deserialization(raw_container)
            for raw_container in raw_data["work_packages"] or []
        ]
        LOGGER.debug(
            "Loaded %d work packages from %s",
            len(self._work_packages),
            configuration.DATA_WORK_PACKAGES_PATH,
        )

    def __save_data(self) -> None:
        serializable = {
            "work_packages": [
                self.__convert_container_for_serialization(deepcopy(container))
                for container in self.work_packages
            ]
        }
        configuration.DATA_WORK_PACKAGES_PATH.write_text(
            dump(serializable, Dumper=Dumper, allow_unicode=True, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._work_packages is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._work_packages = None
        self.is_dirty = False

    def __convert_dates_for_serialization(self, entity: dict[str, Any]) -> None:
        for field in _DATE_FIELDS:
            entity[field] = time.date_to_iso_str_optional(entity.get(field))

    def __convert_dates_for_deserialization(self, entity: dict[str, Any]) -> None:
        for field in _DATE_FIELDS:
            entity[field] = time.date_from_str_optional(entity.get(field))

    def __convert_container_for_serialization(
        self, container: Container
    ) -> dict[str, Any]:
        serializable = cast(dict[str, Any], container)
        self.__convert_dates_for_serialization(serializable)
        phases = serializable.get("phases", [])
        for phase in phases:
            self.__convert_dates_for_serialization(phase)
        task_lists = [phase["tasks"] for phase in phases]
        if "tasks" in serializable:
            task_lists.append(serializable["tasks"])
        for tasks in task_lists:
            for task in tasks:
                # Derived from the container type on load
                task.pop("is_demand", None)
                self.__convert_dates_for_serialization(task)
        return serializable

    def __convert_container_for_deserialization(
        self, container: dict[str, Any]
    ) -> Container:
        self.__convert_dates_for_deserialization(container)
        if container["type"] == "Project":
            for phase in container["phases"]:
                self.__convert_dates_for_deserialization(phase)
                phase["tasks"] = [
                    self.__convert_task_for_deserialization(
                        raw_task, is_demand=False, phase_id=phase["id"]
                    )
                    for raw_task in phase.get("tasks") or []
                ]
        elif container["type"] == "Demand":
            container["tasks"] = [
                self.__convert_task_for_deserialization(raw_task, is_demand=True)
                for raw_task in container.get("tasks") or []
            ]
        else:
            raise ValueError(
                f"Unknown work package type '{container['type']}' "
                f"for '{container.get('id')}'"
            )
        return cast(Container, container)

    def __convert_task_for_deserialization(
        self,
        task: dict[str, Any],
        is_demand: bool,
        phase_id: Optional[str] = None,
    ) -> Task:
        self.__convert_dates_for_deserialization(task)
        if task.get("created_at") is None:
            task["created_at"] = task["start_date"]
        task["owner_id"] = normalize_owner_id(task.get("owner_id"))
        task["phase_id"] = task.get("phase_id", phase_id)
        task["project_id"] = task.get("project_id") or ""
        task["priority"] = task.get("priority")
        task["hours"] = task.get("hours") or 0
        task["is_demand"] = is_demand
        return validate_task_dates(cast(Task, task))

    def get_all_work_packages(self) -> list[Container]:
        return deepcopy(self.work_packages)

    def get_all_tasks(self) -> list[Task]:
        return flatten_work_packages(self.work_packages)

    def set_all_work_packages(self, work_packages: list[Container]) -> None:
        self.is_dirty = True
        self._work_packages = deepcopy(work_packages)


WORK_PACKAGE_REPO = WorkPackageRepository()
