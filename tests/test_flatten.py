import unittest

import pendulum

from workboard.model.task import Task
from workboard.model.work_package import Container
from workboard.service.flatten import (
    find_task,
    find_task_context,
    flatten_work_packages,
)

DAY = pendulum.date(2024, 1, 1)


def _task(id: str, owner_id: str = "ana") -> Task:
    return {
        "id": id,
        "title": f"Task {id}",
        "project_id": "P01",
        "phase_id": None,
        "hours": 2,
        "owner_id": owner_id,
        "start_date": DAY,
        "end_date": DAY,
        "priority": "high",
        "status": "toDo",
        "is_demand": False,
        "created_at": DAY,
    }


def _containers() -> list[Container]:
    return [
        {
            "type": "Project",
            "id": "P01",
            "title": "Website",
            "start_date": DAY,
            "end_date": DAY,
            "created_at": DAY,
            "phases": [
                {
                    "type": "Phase",
                    "id": "ph-1",
                    "title": "Design",
                    "project_id": "P01",
                    "start_date": DAY,
                    "end_date": DAY,
                    "created_at": DAY,
                    "tasks": [_task("t1"), _task("t2", owner_id="")],
                },
                {
                    "type": "Phase",
                    "id": "ph-2",
                    "title": "",
                    "project_id": "P01",
                    "start_date": DAY,
                    "end_date": DAY,
                    "created_at": DAY,
                    "tasks": [_task("t3")],
                },
            ],
        },
        {
            "type": "Demand",
            "id": "D01",
            "title": "Support",
            "start_date": DAY,
            "end_date": DAY,
            "created_at": DAY,
            "tasks": [_task("t4")],
        },
    ]


class TestFlattenWorkPackages(unittest.TestCase):
    def test_collects_tasks_in_container_order(self) -> None:
        tasks = flatten_work_packages(_containers())
        self.assertEqual([task["id"] for task in tasks], ["t1", "t2", "t3", "t4"])

    def test_flags_demand_tasks(self) -> None:
        tasks = {task["id"]: task for task in flatten_work_packages(_containers())}
        self.assertFalse(tasks["t1"]["is_demand"])
        self.assertTrue(tasks["t4"]["is_demand"])

    def test_normalizes_missing_owner(self) -> None:
        tasks = {task["id"]: task for task in flatten_work_packages(_containers())}
        self.assertEqual(tasks["t2"]["owner_id"], "unassigned")

    def test_returns_copies(self) -> None:
        containers = _containers()
        tasks = flatten_work_packages(containers)
        tasks[0]["status"] = "done"
        self.assertEqual(containers[0]["phases"][0]["tasks"][0]["status"], "toDo")

    def test_empty(self) -> None:
        self.assertEqual(flatten_work_packages([]), [])


class TestFindTaskContext(unittest.TestCase):
    def test_project_task(self) -> None:
        self.assertEqual(
            find_task_context(_containers(), "t1"),
            {"project_title": "Website", "phase_title": "Design", "phase_id": "ph-1"},
        )

    def test_untitled_phase(self) -> None:
        self.assertEqual(find_task_context(_containers(), "t3")["phase_title"], "N/A")

    def test_demand_task(self) -> None:
        self.assertEqual(
            find_task_context(_containers(), "t4"),
            {"project_title": "Support", "phase_title": "tasks", "phase_id": None},
        )

    def test_unknown_task(self) -> None:
        context = find_task_context(_containers(), "missing")
        self.assertEqual(context["project_title"], "N/A")
        self.assertEqual(context["phase_title"], "N/A")


class TestFindTask(unittest.TestCase):
    def test_found_and_missing(self) -> None:
        task = find_task(_containers(), "t4")
        assert task is not None
        self.assertTrue(task["is_demand"])
        self.assertIsNone(find_task(_containers(), "missing"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
