"""Exception hierarchy for gjira.

Domain-level results (issue not found, already on the branch) are not errors;
they are returned as workflow outcomes. Everything here aborts the current
command.
"""

from __future__ import annotations

from dataclasses import dataclass


class GjiraError(Exception):
    """Base class for unrecoverable gjira errors."""


class TrackerError(GjiraError):
    """The issue tracker could not be reached or answered with an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class GitCommandError(GjiraError):
    """A git process exited non-zero or could not be started."""

    command: tuple[str, ...]
    returncode: int
    stderr: str = ""

    def __str__(self) -> str:
        detail = self.stderr.strip() or f"exit status {self.returncode}"
        return f"{' '.join(self.command)} failed: {detail}"


class WizardAborted(GjiraError):
    """The user left the configuration wizard before it completed."""

    def __str__(self) -> str:
        return "Configuration aborted"
