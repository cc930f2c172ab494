"""Unit tests for configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from gjira.config import GjiraSettings, TrackerSettings, default_config_path


def test_settings_defaults(tmp_path: Path) -> None:
    settings = GjiraSettings()

    assert settings.log_level == "WARNING"
    assert settings.allow_insecure_tls is True
    assert settings.api_version == "2"
    assert settings.remote == "origin"
    assert settings.git_binary == "git"
    assert settings.request_timeout is None
    assert settings.config_path == tmp_path / "xdg" / "configstore" / "gjira.json"


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "GJIRA_LOG_LEVEL=DEBUG",
                "GJIRA_ALLOW_INSECURE_TLS=false",
                "GJIRA_REMOTE=upstream",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = GjiraSettings()

    assert settings.log_level == "DEBUG"
    assert settings.allow_insecure_tls is False
    assert settings.remote == "upstream"


def test_settings_environment_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GJIRA_CONFIG_PATH", str(tmp_path / "custom.json"))
    monkeypatch.setenv("GJIRA_REQUEST_TIMEOUT", "15")

    settings = GjiraSettings()

    assert settings.config_path == tmp_path / "custom.json"
    assert settings.request_timeout == 15.0


def test_default_config_path_without_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_config_path() == tmp_path / ".config" / "configstore" / "gjira.json"


def test_tracker_settings_completeness() -> None:
    assert not TrackerSettings().is_complete
    assert not TrackerSettings(
        host="jira.example.com", username="alice", password="x", default_branch="  "
    ).is_complete
    assert TrackerSettings(
        host="jira.example.com", username="alice", password="x", default_branch="develop"
    ).is_complete


def test_tracker_settings_use_stored_key_names(tracker_settings: TrackerSettings) -> None:
    assert tracker_settings.to_store() == {
        "jiraHost": "jira.example.com",
        "jiraUser": "alice",
        "jiraPass": "x",
        "defaultBranch": "develop",
    }

    restored = TrackerSettings.model_validate(tracker_settings.to_store())
    assert restored == tracker_settings


def test_tracker_settings_repr_hides_password(tracker_settings: TrackerSettings) -> None:
    assert "password" not in repr(tracker_settings)


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GJIRA_LOG_LEVEL", " debug ")

    assert GjiraSettings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GJIRA_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        GjiraSettings()
