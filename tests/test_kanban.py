import unittest
from typing import Optional

import pendulum

from workboard.model.task import Task
from workboard.model.team_member import TeamMember
from workboard.service.kanban import build_kanban_columns, kanban_week_tasks, sort_tasks

MONDAY = pendulum.date(2024, 1, 1)

MEMBERS: list[TeamMember] = [
    {"id": "m1", "name": "Zoe"},
    {"id": "m2", "name": "Ana"},
    {"id": "unassigned", "name": "unassigned"},
]


def _task(
    title: str,
    priority: Optional[str] = None,
    owner_id: str = "unassigned",
    start_offset: int = 0,
    end_offset: int = 0,
    status: str = "toDo",
    hours: float = 1,
) -> Task:
    return {
        "id": title,
        "title": title,
        "project_id": "",
        "phase_id": None,
        "hours": hours,
        "owner_id": owner_id,
        "start_date": MONDAY.add(days=start_offset),
        "end_date": MONDAY.add(days=end_offset),
        "priority": priority,
        "status": status,
        "is_demand": False,
        "created_at": MONDAY.add(days=start_offset),
    }


def _titles(tasks: list[Task]) -> list[str]:
    return [task["title"] for task in tasks]


class TestKanbanWeekTasks(unittest.TestCase):
    def test_keeps_tasks_active_monday_to_sunday(self) -> None:
        tasks = [
            _task("last-week", start_offset=-5, end_offset=-1),
            _task("overlapping-monday", start_offset=-3, end_offset=0),
            _task("sunday", start_offset=6, end_offset=6),
            _task("next-week", start_offset=7, end_offset=9),
        ]

        week_tasks = kanban_week_tasks(tasks, MONDAY.add(days=3))

        self.assertEqual(_titles(week_tasks), ["overlapping-monday", "sunday"])

    def test_sunday_anchor_shows_its_own_week(self) -> None:
        tasks = [_task("monday"), _task("next-monday", start_offset=7, end_offset=7)]
        self.assertEqual(
            _titles(kanban_week_tasks(tasks, MONDAY.add(days=6))), ["monday"]
        )


class TestSortTasks(unittest.TestCase):
    def test_priority_urgent_first_unknown_last(self) -> None:
        tasks = [
            _task("b", "low"),
            _task("a", None),
            _task("c", "Urgent"),
            _task("d", "whatever"),
            _task("e", "high"),
        ]
        self.assertEqual(
            _titles(sort_tasks(tasks, "priority", MEMBERS)), ["c", "e", "b", "a", "d"]
        )

    def test_priority_ties_fall_back_to_title(self) -> None:
        tasks = [_task("beta", "high"), _task("Alpha", "high")]
        self.assertEqual(
            _titles(sort_tasks(tasks, "priority", MEMBERS)), ["Alpha", "beta"]
        )

    def test_responsible_sorts_by_member_name(self) -> None:
        tasks = [_task("x", owner_id="m1"), _task("y", owner_id="m2")]
        self.assertEqual(_titles(sort_tasks(tasks, "responsible", MEMBERS)), ["y", "x"])

    def test_dates(self) -> None:
        tasks = [
            _task("late", start_offset=3, end_offset=3),
            _task("early", start_offset=1, end_offset=5),
        ]
        self.assertEqual(
            _titles(sort_tasks(tasks, "start_date", MEMBERS)), ["early", "late"]
        )
        self.assertEqual(
            _titles(sort_tasks(tasks, "end_date", MEMBERS)), ["late", "early"]
        )
        self.assertEqual(
            _titles(sort_tasks(tasks, "created_at", MEMBERS)), ["early", "late"]
        )


class TestBuildKanbanColumns(unittest.TestCase):
    def test_one_column_per_status(self) -> None:
        tasks = [
            _task("a", "low", status="doing", hours=2),
            _task("b", "urgent", status="doing", hours=3.5),
            _task("c", status="done"),
            _task("d", status="archived"),
        ]

        columns = build_kanban_columns(
            tasks, ["toDo", "doing", "done"], "priority", MEMBERS
        )

        self.assertEqual(
            [column["status"] for column in columns], ["toDo", "doing", "done"]
        )
        self.assertEqual(columns[0]["tasks"], [])
        self.assertEqual(columns[0]["task_count"], 0)
        self.assertEqual(_titles(columns[1]["tasks"]), ["b", "a"])
        self.assertEqual(columns[1]["task_count"], 2)
        self.assertEqual(columns[1]["total_hours"], 5.5)
        self.assertEqual(columns[2]["task_count"], 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
