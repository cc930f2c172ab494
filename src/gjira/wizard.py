"""Interactive configuration wizard."""

from __future__ import annotations

import getpass
import logging
from collections.abc import Callable
from dataclasses import dataclass

from gjira.config import DEFAULT_BASE_BRANCH, TrackerSettings
from gjira.console import Console
from gjira.errors import WizardAborted
from gjira.settings_store import SettingsStore

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]
Validator = Callable[[str], str | None]


def _required(message: str) -> Validator:
    def validate(value: str) -> str | None:
        return None if value else message

    return validate


def validate_host(value: str) -> str | None:
    if not value or value.startswith("/"):
        return "Please enter a valid JIRA host"
    return None


@dataclass(frozen=True, slots=True)
class Question:
    field: str
    message: str
    validate: Validator
    secret: bool = False


QUESTIONS: tuple[Question, ...] = (
    Question("host", "JIRA host url i.e. jira.example.com", validate_host),
    Question("username", "JIRA Username", _required("Please enter a valid JIRA username")),
    Question(
        "password", "JIRA password", _required("Please enter a valid JIRA password"), secret=True
    ),
    Question("default_branch", "Default GIT branch", _required("Please enter a valid branch name")),
)


def _defaults(current: TrackerSettings) -> dict[str, str]:
    return {
        "host": current.host,
        "username": current.username,
        # Never echo a stored password back as a default.
        "password": "",
        "default_branch": current.default_branch or DEFAULT_BASE_BRANCH,
    }


class ConfigurationWizard:
    """Collects the tracker settings and saves them in one write."""

    def __init__(
        self,
        store: SettingsStore,
        *,
        console: Console | None = None,
        ask: Ask = input,
        ask_secret: Ask = getpass.getpass,
    ) -> None:
        self._store = store
        self._console = console or Console()
        self._ask = ask
        self._ask_secret = ask_secret

    def _prompt(self, question: Question, default: str) -> str:
        label = f"? {question.message}"
        if default:
            label += f" ({default})"
        label += ": "

        ask = self._ask_secret if question.secret else self._ask
        while True:
            try:
                raw = ask(label)
            except (EOFError, KeyboardInterrupt) as e:
                self._console.plain()
                raise WizardAborted() from e

            answer = raw.strip()
            if not answer:
                value = default
            else:
                # Secrets are stored exactly as typed.
                value = raw if question.secret else answer
            problem = question.validate(value)
            if problem is None:
                return value
            self._console.error(f">> {problem}")

    def run(self, current: TrackerSettings | None = None) -> TrackerSettings:
        defaults = _defaults(current or self._store.load())
        answers = {q.field: self._prompt(q, defaults[q.field]) for q in QUESTIONS}

        settings = TrackerSettings.model_validate(answers)
        self._store.save(settings)
        logger.info(
            "Tracker settings updated",
            extra={"host": settings.host, "default_branch": settings.default_branch},
        )
        self._console.success("Config saved")
        return settings
