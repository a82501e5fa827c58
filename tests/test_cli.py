"""Tests for the taskcal command line."""

import textwrap

import pytest
from typer.testing import CliRunner

from taskcal import configuration
from taskcal.repository.configuration import ConfigurationRepository
from taskcal.repository.task import TaskRepository
from taskcal.terminal import calendar as terminal_calendar
from taskcal.terminal import configuration as terminal_configuration
from taskcal.terminal.app import app

runner = CliRunner()

TASKS_YAML = textwrap.dedent("""\
    tasks:
      - id: 1
        title: Gym
        status: TODO
        due_date: 2024-03-05T07:00:00
        estimated_time: 45
      - id: 2
        title: Anniversary
        status: DONE
        due_date: 2024-03-05
      - id: 3
        title: Dentist
        status: IN_PROGRESS
        priority: HIGH
        due_date: 2024-03-07T09:00:00
""")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def store(tmp_path, monkeypatch):
    """Point the CLI at a throwaway task store and config file."""
    tasks_path = tmp_path / "tasks.yaml"
    tasks_path.write_text(TASKS_YAML)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("start_of_week: 0\n")
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", tasks_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)

    config_repo = ConfigurationRepository()
    monkeypatch.setattr(terminal_calendar, "TASK_REPO", TaskRepository())
    monkeypatch.setattr(terminal_calendar, "CONFIGURATION_REPO", config_repo)
    monkeypatch.setattr(terminal_configuration, "CONFIGURATION_REPO", config_repo)
    return tasks_path


@pytest.fixture
def config_repo():
    return terminal_calendar.CONFIGURATION_REPO


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

class TestAgendaCommand:
    def test_lists_open_tasks(self):
        result = runner.invoke(app, ["agenda", "2024-03-04", "--days", "7"])

        assert result.exit_code == 0, result.output
        assert "2024-03-05 Tue" in result.output
        assert "Gym" in result.output
        assert "Dentist" in result.output
        assert "Anniversary" not in result.output

    def test_alias_and_include_completed(self):
        result = runner.invoke(
            app, ["a", "2024-03-04", "-d", "7", "--include-completed"]
        )

        assert result.exit_code == 0, result.output
        assert "Anniversary" in result.output

    def test_days_default_from_config(self, config_repo):
        config_repo.update_config(agenda_days=2)
        result = runner.invoke(app, ["agenda", "2024-03-04"])

        assert result.exit_code == 0, result.output
        assert "Gym" in result.output
        assert "Dentist" not in result.output

    def test_no_events(self):
        result = runner.invoke(app, ["agenda", "2025-01-01"])
        assert result.exit_code == 0, result.output
        assert "No events" in result.output

    def test_no_header(self):
        with_header = runner.invoke(app, ["agenda", "2024-03-04"])
        without_header = runner.invoke(app, ["--no-header", "agenda", "2024-03-04"])

        assert "taskcal" in with_header.output
        assert without_header.exit_code == 0, without_header.output
        assert "taskcal" not in without_header.output


class TestMonthCommand:
    def test_renders_month(self):
        result = runner.invoke(app, ["month", "2024-03-01"])
        assert result.exit_code == 0, result.output
        assert "March 2024" in result.output

    def test_offset(self):
        result = runner.invoke(app, ["m", "2024-03-31", "--offset", "1"])
        assert result.exit_code == 0, result.output
        assert "April 2024" in result.output

    def test_invalid_start_of_week(self):
        result = runner.invoke(app, ["month", "2024-03-01", "--start-of-week", "9"])
        assert result.exit_code == 2

    def test_conflicting_all_day_flags(self):
        result = runner.invoke(
            app, ["month", "2024-03-01", "--all-day-only", "--no-all-day"]
        )
        assert result.exit_code == 2


class TestWeekAndDayCommands:
    def test_week(self):
        result = runner.invoke(app, ["week", "2024-03-05"])
        assert result.exit_code == 0, result.output
        assert "Mar 3 - Mar 9, 2024" in result.output

    def test_week_starting_monday(self):
        result = runner.invoke(app, ["w", "2024-03-05", "-sw", "1"])
        assert result.exit_code == 0, result.output
        assert "Mar 4 - Mar 10, 2024" in result.output

    def test_day(self):
        result = runner.invoke(app, ["day", "2024-03-05"])
        assert result.exit_code == 0, result.output
        assert "2024-03-05 Tue" in result.output
        assert "Gym" in result.output

    def test_invalid_date(self):
        result = runner.invoke(app, ["day", "someday"])
        assert result.exit_code == 2


class TestFreeCommand:
    def test_free_slot(self):
        result = runner.invoke(app, ["free", "08:00", "--date", "2024-03-05", "-m", "30"])
        assert result.exit_code == 0, result.output
        assert "is free" in result.output

    def test_busy_slot(self):
        result = runner.invoke(app, ["f", "07:30", "--date", "2024-03-05"])
        assert result.exit_code == 1
        assert "conflicts with" in result.output
        assert "Gym" in result.output

    def test_excluding_the_moved_task(self):
        result = runner.invoke(
            app, ["free", "07:30", "--date", "2024-03-05", "--exclude", "1"]
        )
        assert result.exit_code == 0, result.output

    def test_slot_right_after_a_short_task_is_free(self, store):
        store.write_text(textwrap.dedent("""\
            tasks:
              - id: 9
                title: Quick call
                status: TODO
                due_date: 2024-03-05T10:00:00
                estimated_time: 5
        """))
        result = runner.invoke(app, ["free", "10:10", "--date", "2024-03-05", "-m", "30"])

        assert result.exit_code == 0, result.output
        assert "is free" in result.output

    def test_bad_time(self):
        result = runner.invoke(app, ["free", "7h30"])
        assert result.exit_code == 2


class TestBrokenStore:
    def test_invalid_store_is_reported(self, store):
        store.write_text("tasks: nope\n")
        result = runner.invoke(app, ["agenda", "2024-03-04"])

        assert result.exit_code == 1
        assert "Error" in result.output


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class TestConfigCommands:
    def test_set_and_view(self, config_repo):
        result = runner.invoke(
            app, ["config", "set", "--start-of-week", "1", "--agenda-days", "5"]
        )
        assert result.exit_code == 0, result.output
        assert config_repo.get_config()["start_of_week"] == 1
        assert config_repo.get_config()["agenda_days"] == 5

        result = runner.invoke(app, ["c", "v"])
        assert result.exit_code == 0, result.output
        assert "1 (Mon)" in result.output

    def test_rejects_invalid_values(self, config_repo):
        result = runner.invoke(app, ["config", "set", "--agenda-days", "0"])
        assert result.exit_code == 2
        assert config_repo.get_config()["agenda_days"] == 14

    def test_week_uses_configured_start(self, config_repo):
        config_repo.update_config(start_of_week=1)
        result = runner.invoke(app, ["week", "2024-03-05"])
        assert "Mar 4 - Mar 10, 2024" in result.output
