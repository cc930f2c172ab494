"""Runtime configuration for gjira.

Two kinds of configuration live here:

- `GjiraSettings`: process settings loaded from environment variables and a
  local `.env` file (if present). These tune how the tool behaves and are never
  written back.
- `TrackerSettings`: the four values collected by the configuration wizard and
  persisted by `gjira.settings_store.SettingsStore`.

The persisted keys keep the names used by earlier releases (`jiraHost`,
`jiraUser`, `jiraPass`, `defaultBranch`) so existing stores keep working.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "gjira"
DEFAULT_BASE_BRANCH = "master"


def default_config_path() -> Path:
    """Return the default location of the persisted tracker settings."""

    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "configstore" / f"{APP_NAME}.json"


class GjiraSettings(BaseSettings):
    """Settings for the gjira process.

    Environment variables:
    - GJIRA_CONFIG_PATH        (optional)
    - GJIRA_LOG_LEVEL          (optional)
    - GJIRA_ALLOW_INSECURE_TLS (optional)
    - GJIRA_API_VERSION        (optional)
    - GJIRA_REMOTE             (optional)
    - GJIRA_GIT_BINARY         (optional)
    - GJIRA_REQUEST_TIMEOUT    (optional)
    """

    config_path: Path = Field(
        default_factory=default_config_path,
        description="File holding the persisted tracker settings",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root logging level",
    )
    allow_insecure_tls: bool = Field(
        default=True,
        description=(
            "Skip TLS certificate verification for the tracker host. Enabled by default "
            "because self-hosted Jira instances commonly use self-signed certificates."
        ),
    )
    api_version: str = Field(
        default="2",
        description="Jira REST API version",
    )
    remote: str = Field(
        default="origin",
        description="Git remote used for pull and push",
    )
    git_binary: str = Field(
        default="git",
        description="Git executable",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Tracker request timeout in seconds (unset means wait indefinitely)",
    )

    model_config = SettingsConfigDict(
        env_prefix="GJIRA_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level


class TrackerSettings(BaseModel):
    """Tracker credentials and the default base branch."""

    host: str = Field(default="", alias="jiraHost")
    username: str = Field(default="", alias="jiraUser")
    password: str = Field(default="", alias="jiraPass", repr=False)
    default_branch: str = Field(default="", alias="defaultBranch")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def is_complete(self) -> bool:
        return all(
            value.strip()
            for value in (self.host, self.username, self.password, self.default_branch)
        )

    def to_store(self) -> dict[str, str]:
        """Return the persisted representation (legacy key names)."""

        return self.model_dump(by_alias=True)
