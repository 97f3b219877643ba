import unittest
from typing import Optional

import pendulum

from workboard.model.task import Task
from workboard.model.team_member import TeamMember
from workboard.service.workload import (
    build_workload,
    card_name_options,
    order_members,
    responsible_options,
)
from workboard.view.views.workload import lane_segments, task_label

MONDAY = pendulum.date(2024, 1, 1)

MEMBERS: list[TeamMember] = [
    {"id": "unassigned", "name": "unassigned"},
    {"id": "m2", "name": "bruno"},
    {"id": "m1", "name": "Ana"},
]


def _task(
    id: str,
    owner_id: str,
    start_offset: int,
    end_offset: int,
    project_id: str = "",
    hours: float = 0,
    title: Optional[str] = None,
) -> Task:
    return {
        "id": id,
        "title": title or id,
        "project_id": project_id,
        "phase_id": None,
        "hours": hours,
        "owner_id": owner_id,
        "start_date": MONDAY.add(days=start_offset),
        "end_date": MONDAY.add(days=end_offset),
        "priority": None,
        "status": "toDo",
        "is_demand": False,
        "created_at": MONDAY,
    }


class TestOrderMembers(unittest.TestCase):
    def test_ascending_with_unassigned_last(self) -> None:
        names = [member["name"] for member in order_members(MEMBERS)]
        self.assertEqual(names, ["Ana", "bruno", "unassigned"])

    def test_descending_with_unassigned_last(self) -> None:
        names = [member["name"] for member in order_members(MEMBERS, "desc")]
        self.assertEqual(names, ["bruno", "Ana", "unassigned"])


class TestOptions(unittest.TestCase):
    def test_card_names(self) -> None:
        tasks = [
            _task("Wireframes", "m1", 0, 0, project_id="P01"),
            _task("API", "m1", 0, 0, project_id="P01"),
        ]
        self.assertEqual(card_name_options(tasks), ["API", "P01", "Wireframes"])

    def test_responsibles(self) -> None:
        tasks = [_task("a", "m2", 0, 0), _task("b", "", 0, 0)]
        self.assertEqual(responsible_options(tasks, MEMBERS), ["bruno", "unassigned"])


class TestBuildWorkload(unittest.TestCase):
    def test_rows_and_placements(self) -> None:
        tasks = [
            _task("A", "m1", 0, 0),
            _task("B", "m1", 0, 1),
            _task("C", "m1", 2, 2),
            _task("D", "m2", 3, 4),
        ]

        layout = build_workload(tasks, MEMBERS, "day", MONDAY)

        self.assertEqual(len(layout["columns"]), 5)
        rows = {row["member"]["id"]: row for row in layout["rows"]}
        self.assertEqual(
            [row["member"]["id"] for row in layout["rows"]], ["m1", "m2", "unassigned"]
        )
        self.assertEqual(rows["m1"]["lane_count"], 2)
        self.assertEqual(rows["m2"]["lane_count"], 1)
        self.assertEqual(rows["unassigned"]["lane_count"], 1)
        self.assertEqual(rows["unassigned"]["placements"], [])

        placements = {p["task"]["id"]: p for p in rows["m1"]["placements"]}
        self.assertEqual(placements["B"]["lane"]["lane_index"], 0)
        self.assertEqual(placements["A"]["lane"]["lane_index"], 1)
        self.assertEqual(placements["C"]["lane"]["lane_index"], 0)
        self.assertEqual(
            placements["B"]["span"], {"start_column_index": 0, "end_column_index": 1}
        )

    def test_lanes_include_tasks_outside_the_window(self) -> None:
        tasks = [
            _task("previous-week", "m1", -7, 0),
            _task("this-week", "m1", 0, 2),
            _task("next-week", "m1", 7, 8),
        ]

        layout = build_workload(tasks, MEMBERS, "day", MONDAY)

        row = next(row for row in layout["rows"] if row["member"]["id"] == "m1")
        self.assertEqual(row["lane_count"], 2)
        self.assertEqual(
            sorted(p["task"]["id"] for p in row["placements"]),
            ["previous-week", "this-week"],
        )

    def test_unknown_owner_gets_a_row(self) -> None:
        tasks = [_task("A", "ghost", 0, 0)]

        with self.assertLogs("workboard.service.workload", level="WARNING"):
            layout = build_workload(tasks, MEMBERS, "week", MONDAY)

        ghost = next(row for row in layout["rows"] if row["member"]["id"] == "ghost")
        self.assertEqual(len(ghost["placements"]), 1)

    def test_task_without_owner_key_lands_on_the_unassigned_row(self) -> None:
        task = _task("orphan", "m1", 0, 0)
        del task["owner_id"]  # type: ignore[misc]

        layout = build_workload([task], MEMBERS, "day", MONDAY)

        row = next(row for row in layout["rows"] if row["member"]["id"] == "unassigned")
        self.assertEqual([p["task"]["id"] for p in row["placements"]], ["orphan"])
        self.assertEqual(responsible_options([task], MEMBERS), ["unassigned"])

    def test_unassigned_row_always_present(self) -> None:
        layout = build_workload([], [{"id": "m1", "name": "Ana"}], "month", MONDAY)
        self.assertEqual(
            [row["member"]["id"] for row in layout["rows"]], ["m1", "unassigned"]
        )
        self.assertEqual(len(layout["columns"]), 12)


class TestLaneSegments(unittest.TestCase):
    def test_tasks_sharing_a_column_are_hidden(self) -> None:
        tasks = [_task("A", "m1", 0, 0), _task("B", "m1", 2, 2)]
        layout = build_workload(tasks, MEMBERS, "week", MONDAY)
        row = next(row for row in layout["rows"] if row["member"]["id"] == "m1")

        drawn, hidden = lane_segments(row["placements"], 0)

        self.assertEqual([p["task"]["id"] for p in drawn], ["A"])
        self.assertEqual(hidden, 1)

    def test_task_label(self) -> None:
        task = _task("t", "m1", 0, 0, project_id="P06", hours=4.5, title="Review")
        self.assertEqual(task_label(task), "[P06] Review (4.5h)")


if __name__ == "__main__":
    unittest.main(verbosity=2)
