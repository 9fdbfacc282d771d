"""
Minimal smoke tests for gym-routine CLI.

Tests basic functionality:
- App runs without errors
- Profile file is created
- Routine is generated, shuffled and shown
- Invalid input exits non-zero
"""

import json

import pytest
from typer.testing import CliRunner

from gym_routine.cli.main import app


runner = CliRunner()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Profile directory under an isolated GYM_ROUTINE_HOME."""
    monkeypatch.setenv("GYM_ROUTINE_HOME", str(tmp_path))
    return tmp_path / "users"


def _init(data_dir, *extra):
    return runner.invoke(app, [
        "init",
        "--data-dir", str(data_dir),
        "--gender", "female",
        "--age", "29",
        "--objective", "hypertrophy",
        "--days-per-week", "2",
        "--muscle", "Lats",
        "--muscle", "Upper Chest",
        *extra,
    ])


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "gym-routine" in result.output or "routine" in result.output.lower()

    def test_init_creates_profile(self, data_dir):
        result = _init(data_dir)
        assert result.exit_code == 0, result.output
        assert (data_dir / "default.json").exists()

    def test_init_rejects_bad_gender(self, data_dir):
        result = runner.invoke(app, ["init", "--data-dir", str(data_dir), "--gender", "robot"])
        assert result.exit_code == 1
        assert "gender" in result.output
        assert not (data_dir / "default.json").exists()

    def test_init_existing_declined(self, data_dir):
        _init(data_dir)
        result = runner.invoke(app, ["init", "--data-dir", str(data_dir)], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output

    def test_show_profile(self, data_dir):
        _init(data_dir)
        result = runner.invoke(app, ["show-profile", "--data-dir", str(data_dir)])
        assert result.exit_code == 0
        assert "female" in result.output

    def test_show_profile_missing(self, data_dir):
        result = runner.invoke(app, ["show-profile", "--data-dir", str(data_dir), "--user", "ghost"])
        assert result.exit_code == 1
        assert "ghost" in result.output

    def test_update_profile_out_of_range(self, data_dir):
        _init(data_dir)
        result = runner.invoke(app, ["update-profile", "--data-dir", str(data_dir), "-d", "7"])
        assert result.exit_code == 1
        assert "days_per_week" in result.output

    def test_generate_and_show_json(self, data_dir):
        _init(data_dir)
        result = runner.invoke(app, ["generate", "--data-dir", str(data_dir)])
        assert result.exit_code == 0, result.output
        assert "Lats" in result.output

        result = runner.invoke(app, ["show-routine", "--data-dir", str(data_dir), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["weeks"]) == 3
        muscles = [d["muscle"] for w in data["weeks"] for d in w["days"]]
        assert muscles == ["Lats", "Upper Chest"] * 3
        assert len(data["weeks"][0]["days"][0]["exercises"]) == 3

    def test_generate_without_muscles(self, data_dir):
        runner.invoke(app, ["init", "--data-dir", str(data_dir), "-d", "3"])
        result = runner.invoke(app, ["generate", "--data-dir", str(data_dir)])
        assert result.exit_code == 1

    def test_shuffle_requires_routine(self, data_dir):
        _init(data_dir)
        result = runner.invoke(app, ["shuffle", "--data-dir", str(data_dir)])
        assert result.exit_code == 1
        assert "Generate" in result.output

    def test_shuffle_with_seed(self, data_dir):
        _init(data_dir)
        runner.invoke(app, ["generate", "--data-dir", str(data_dir), "--weeks", "2"])
        result = runner.invoke(app, ["shuffle", "--data-dir", str(data_dir), "--seed", "3"])
        assert result.exit_code == 0, result.output

        shown = runner.invoke(app, ["show-routine", "--data-dir", str(data_dir), "--json"])
        data = json.loads(shown.stdout)
        assert len(data["weeks"]) == 2
        assert all(len(w["days"]) == 2 for w in data["weeks"])

    def test_show_routine_before_generate(self, data_dir):
        _init(data_dir)
        result = runner.invoke(app, ["show-routine", "--data-dir", str(data_dir)])
        assert result.exit_code == 0
        assert "No routine" in result.output

    def test_muscles_lists_catalog(self, data_dir):
        result = runner.invoke(app, ["muscles", "--data-dir", str(data_dir)])
        assert result.exit_code == 0
        assert "Lats" in result.output

    def test_muscles_one_group(self, data_dir):
        result = runner.invoke(app, ["muscles", "--data-dir", str(data_dir), "-m", "Lats"])
        assert result.exit_code == 0
        assert "Lats" in result.output

    def test_muscles_unknown_group(self, data_dir):
        result = runner.invoke(app, ["muscles", "--data-dir", str(data_dir), "-m", "Neck"])
        assert result.exit_code == 1

    def test_delete_profile(self, data_dir):
        _init(data_dir)
        result = runner.invoke(app, ["delete-profile", "--data-dir", str(data_dir), "--yes"])
        assert result.exit_code == 0
        assert not (data_dir / "default.json").exists()


class TestInteractiveMenu:
    def test_quit(self, data_dir):
        result = runner.invoke(app, [], input="0\n")
        assert result.exit_code == 0

    def test_unknown_choice(self, data_dir):
        result = runner.invoke(app, [], input="9\n")
        assert result.exit_code == 1
        assert "Unknown choice" in result.output

    def test_muscles_from_menu(self, data_dir):
        result = runner.invoke(app, [], input="5\n")
        assert result.exit_code == 0
        assert "Lats" in result.output
