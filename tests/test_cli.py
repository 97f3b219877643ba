import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml
from typer.testing import CliRunner

from workboard import configuration
from workboard.initialize import initialize
from workboard.repository.configuration import CONFIGURATION_REPO
from workboard.repository.team import TEAM_REPO
from workboard.repository.work_package import WORK_PACKAGE_REPO
from workboard.terminal.app import app
from workboard.view import state as view_state

TEAM = {
    "team": [{"id": "m1", "name": "Ana"}, {"id": "unassigned", "name": "unassigned"}]
}

WORK_PACKAGES = {
    "work_packages": [
        {
            "type": "Project",
            "id": "P01",
            "title": "Website",
            "phases": [
                {
                    "type": "Phase",
                    "id": "ph-1",
                    "title": "Design",
                    "project_id": "P01",
                    "tasks": [
                        {
                            "id": "t1",
                            "title": "Wireframes",
                            "project_id": "P01",
                            "hours": 6,
                            "owner_id": "m1",
                            "start_date": "2024-01-02",
                            "end_date": "2024-01-03",
                            "priority": "high",
                            "status": "doing",
                        }
                    ],
                }
            ],
        },
        {
            "type": "Demand",
            "id": "D01",
            "title": "Support",
            "tasks": [
                {
                    "id": "t2",
                    "title": "Triage",
                    "start_date": "2024-01-04",
                    "end_date": "2024-01-04",
                    "priority": "urgent",
                    "status": "toDo",
                }
            ],
        },
    ]
}


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        root = Path(temp_dir.name)

        paths = {
            "CONFIG_PATH": root / "config",
            "APP_CONFIG_PATH": root / "config" / "config.yaml",
            "DATA_PATH": root / "data",
            "DATA_WORK_PACKAGES_PATH": root / "data" / "work_packages.yaml",
            "DATA_TEAM_PATH": root / "data" / "team.yaml",
        }
        for name, path in paths.items():
            patcher = mock.patch.object(configuration, name, path)
            patcher.start()
            self.addCleanup(patcher.stop)

        initialize()
        configuration.DATA_TEAM_PATH.write_text(yaml.safe_dump(TEAM))
        configuration.DATA_WORK_PACKAGES_PATH.write_text(yaml.safe_dump(WORK_PACKAGES))

        self._reset_state()
        self.addCleanup(self._reset_state)
        self.runner = CliRunner()

    def _reset_state(self) -> None:
        CONFIGURATION_REPO.reset()
        TEAM_REPO.reset()
        WORK_PACKAGE_REPO.reset()
        view_state.set_show_header(True)
        view_state.set_no_color(False)

    def invoke(self, *args: str):
        return self.runner.invoke(app, ["--no-header", "--no-color", *args])


class TestWorkloadCommand(CliTestCase):
    def test_day_view(self) -> None:
        result = self.invoke("workload", "--date", "2024-01-01")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("MONDAY, 1", result.output)
        self.assertIn("Ana", result.output)
        self.assertIn("Wireframes", result.output)
        self.assertIn("unassigned", result.output)

    def test_alias_and_month_granularity(self) -> None:
        result = self.invoke("w", "-d", "2024-01-01", "-g", "Month")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("January", result.output)

    def test_filter_by_responsible(self) -> None:
        result = self.invoke("workload", "-d", "2024-01-01", "-r", "Ana")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Wireframes", result.output)
        self.assertNotIn("Triage", result.output)

    def test_header(self) -> None:
        result = self.runner.invoke(app, ["workload", "--date", "2024-01-01"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Jan 1 - Jan 5, 2024", result.output)

    def test_invalid_granularity(self) -> None:
        result = self.invoke("workload", "--granularity", "quarter")
        self.assertNotEqual(result.exit_code, 0)

    def test_inverted_task_dates(self) -> None:
        data = yaml.safe_load(yaml.safe_dump(WORK_PACKAGES))
        data["work_packages"][1]["tasks"][0]["end_date"] = "2024-01-01"
        configuration.DATA_WORK_PACKAGES_PATH.write_text(yaml.safe_dump(data))

        result = self.invoke("workload", "--date", "2024-01-01")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("t2", result.output)


class TestKanbanCommand(CliTestCase):
    def test_week_board(self) -> None:
        result = self.invoke("kanban", "--date", "2024-01-03")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("doing", result.output)
        self.assertIn("Wireframes", result.output)
        self.assertIn("Triage", result.output)

    def test_other_week_is_empty(self) -> None:
        result = self.invoke("k", "-d", "2024-02-01", "-s", "title")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("Wireframes", result.output)


class TestTaskCommands(CliTestCase):
    def test_list(self) -> None:
        result = self.invoke("task", "ls", "--status", "toDo")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Triage", result.output)
        self.assertNotIn("Wireframes", result.output)

    def test_show(self) -> None:
        result = self.invoke("task", "show", "t1")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Website", result.output)
        self.assertIn("Design", result.output)

    def test_move(self) -> None:
        result = self.invoke("t", "m", "t2", "done")

        self.assertEqual(result.exit_code, 0, result.output)
        tasks = {task["id"]: task for task in WORK_PACKAGE_REPO.get_all_tasks()}
        self.assertEqual(tasks["t2"]["status"], "done")
        self.assertTrue(WORK_PACKAGE_REPO.is_dirty)

    def test_move_unknown_task(self) -> None:
        result = self.invoke("task", "move", "missing", "done")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("not found", result.output)

    def test_move_to_unknown_column(self) -> None:
        result = self.invoke("task", "move", "t2", "archive")
        self.assertNotEqual(result.exit_code, 0)


class TestColumnCommands(CliTestCase):
    def test_add(self) -> None:
        result = self.invoke("column", "add", "review")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            CONFIGURATION_REPO.get_config()["kanban_columns"],
            ["toDo", "sprint", "doing", "done", "review"],
        )

    def test_rename_moves_tasks(self) -> None:
        result = self.invoke("col", "r", "toDo", "backlog")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            CONFIGURATION_REPO.get_config()["kanban_columns"][0], "backlog"
        )
        tasks = {task["id"]: task for task in WORK_PACKAGE_REPO.get_all_tasks()}
        self.assertEqual(tasks["t2"]["status"], "backlog")

    def test_delete_column_with_tasks(self) -> None:
        result = self.invoke("column", "delete", "doing")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("doing", CONFIGURATION_REPO.get_config()["kanban_columns"])

    def test_delete_empty_column(self) -> None:
        result = self.invoke("column", "delete", "sprint")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("sprint", CONFIGURATION_REPO.get_config()["kanban_columns"])


class TestTeamAndConfigCommands(CliTestCase):
    def test_team_add_and_list(self) -> None:
        result = self.invoke("team", "add", "Bruno", "--id", "m2")
        self.assertEqual(result.exit_code, 0, result.output)

        result = self.invoke("tm", "ls")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Bruno", result.output)

    def test_team_remove_unassigned(self) -> None:
        result = self.invoke("team", "remove", "unassigned")
        self.assertEqual(result.exit_code, 1)

    def test_config_set_and_view(self) -> None:
        result = self.invoke(
            "config", "set", "--locale", "fr", "--default-granularity", "week"
        )
        self.assertEqual(result.exit_code, 0, result.output)
        config = CONFIGURATION_REPO.get_config()
        self.assertEqual(config["locale"], "fr")
        self.assertEqual(config["default_granularity"], "week")

        result = self.invoke("c", "v")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("urgent", result.output)

    def test_verbose(self) -> None:
        result = self.invoke("--verbose", "workload", "--date", "2024-01-01")
        self.assertEqual(result.exit_code, 0, result.output)


if __name__ == "__main__":
    unittest.main(verbosity=2)
