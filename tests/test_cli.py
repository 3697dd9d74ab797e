"""Tests for the ``python -m liferpg`` command line."""

import pytest

import liferpg.__main__ as cli
from liferpg.settings import Settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(cli, "load_settings", lambda: Settings())


class TestCommandLine:

    def test_status_on_fresh_profile(self, qapp, capsys):
        assert cli.main(["status"]) == 0
        out = capsys.readouterr().out
        assert "Level 1" in out
        assert "Novice" in out
        assert "Body Quest" in out

    def test_log_prints_xp(self, qapp, capsys):
        assert cli.main(["log", "Workout", "30"]) == 0
        out = capsys.readouterr().out
        assert "for 30m of Workout" in out
        assert "Achievement: First Step" in out

    def test_unknown_activity_fails(self, qapp, capsys):
        assert cli.main(["log", "Juggling", "30"]) == 1
        assert "Juggling" in capsys.readouterr().err

    def test_add_activity_then_list(self, qapp, capsys):
        assert cli.main(["add-activity", "Guitar", "Mind", "--xp", "35"]) == 0
        assert cli.main(["activities"]) == 0
        out = capsys.readouterr().out
        assert "Guitar" in out
        assert "35 XP / 30 min" in out

    def test_history(self, qapp, capsys):
        assert cli.main(["history", "--days", "7"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 7
