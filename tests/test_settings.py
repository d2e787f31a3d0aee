"""Tests for settings and CLI argument handling."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from todolist.__main__ import build_settings, parse_args
from todolist.config import Settings
from todolist.models import Priority


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TODOLIST_* variables from the outer environment out of tests."""
    for name in (
        "TODOLIST_TITLE",
        "TODOLIST_DEFAULT_PRIORITY",
        "TODOLIST_CONFIRM_DELETE",
        "TODOLIST_VERBOSE",
        "TODOLIST_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings defaults and env loading."""

    def test_defaults(self):
        settings = Settings()
        assert settings.title == "To-do"
        assert settings.default_priority == Priority.MEDIUM
        assert settings.confirm_delete is False
        assert settings.verbose == 0
        assert settings.log_file is None

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TODOLIST_TITLE", "Groceries")
        monkeypatch.setenv("TODOLIST_DEFAULT_PRIORITY", "high")
        monkeypatch.setenv("TODOLIST_CONFIRM_DELETE", "true")

        settings = Settings()

        assert settings.title == "Groceries"
        assert settings.default_priority == Priority.HIGH
        assert settings.confirm_delete is True

    def test_invalid_priority_rejected(self, monkeypatch: pytest.MonkeyPatch):
        """Unknown priorities fail at startup."""
        monkeypatch.setenv("TODOLIST_DEFAULT_PRIORITY", "urgent")
        with pytest.raises(ValidationError):
            Settings()


class TestCli:
    """Tests for argument parsing."""

    def test_no_args(self):
        args = parse_args([])
        assert args.verbose == 0
        assert args.log_file is None
        assert args.confirm_delete is False

    def test_verbose_counts(self):
        assert parse_args(["-vv"]).verbose == 2

    def test_build_settings_from_args(self, tmp_path: Path):
        log_file = tmp_path / "todo.log"
        args = parse_args(["-v", "--log-file", str(log_file), "--confirm-delete"])

        settings = build_settings(args)

        assert settings.verbose == 1
        assert settings.log_file == log_file
        assert settings.confirm_delete is True

    def test_cli_overrides_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TODOLIST_VERBOSE", "1")
        settings = build_settings(parse_args(["-vv"]))
        assert settings.verbose == 2

    def test_env_used_without_flags(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TODOLIST_CONFIRM_DELETE", "1")
        settings = build_settings(parse_args([]))
        assert settings.confirm_delete is True

    def test_version_exits(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "todolist" in capsys.readouterr().out
