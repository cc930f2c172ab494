"""Test configuration and fixtures."""

import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from gjira.config import TrackerSettings
from gjira.console import Console
from gjira.settings_store import SettingsStore


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the user's config, .env and GJIRA_* variables."""
    for name in (
        "GJIRA_CONFIG_PATH",
        "GJIRA_LOG_LEVEL",
        "GJIRA_ALLOW_INSECURE_TLS",
        "GJIRA_API_VERSION",
        "GJIRA_REMOTE",
        "GJIRA_GIT_BINARY",
        "GJIRA_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """`main()` reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Provide a path for the persisted tracker settings."""
    return tmp_path / "configstore" / "gjira.json"


@pytest.fixture
def settings_store(config_path: Path) -> SettingsStore:
    return SettingsStore(config_path)


@pytest.fixture
def tracker_settings() -> TrackerSettings:
    """Provide complete tracker settings."""
    return TrackerSettings(
        host="jira.example.com",
        username="alice",
        password="x",
        default_branch="develop",
    )


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    """A colorless console writing both streams into one buffer."""
    return Console(out=console_output, err=console_output, color=False)
