"""Wrapper around the local git binary.

Each method runs exactly one git process and blocks until it exits. Nothing
is cached: every read asks git again.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from gjira.errors import GitCommandError

logger = logging.getLogger(__name__)

_BRANCH_REF_PREFIXES = ("refs/heads/", "refs/remotes/")


@dataclass(frozen=True, slots=True)
class RepositoryStatus:
    """Current branch (None on a detached HEAD) and working tree state."""

    current_branch: str | None
    is_clean: bool


def _parse_branch_header(line: str) -> str | None:
    # "## main...origin/main [ahead 1]", "## No commits yet on main", "## HEAD (no branch)"
    header = line[3:] if line.startswith("## ") else line
    for prefix in ("No commits yet on ", "Initial commit on "):
        if header.startswith(prefix):
            return header[len(prefix) :].strip() or None
    if header.startswith("HEAD (no branch)"):
        return None
    branch = header.split("...", 1)[0].split(" ", 1)[0].strip()
    return branch or None


class GitAdapter:
    """Runs git commands in a single working tree."""

    def __init__(self, repo_path: Path | None = None, *, binary: str = "git") -> None:
        self._repo_path = repo_path or Path.cwd()
        self._binary = binary

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def _run(self, *args: str) -> str:
        cmd = (self._binary, *args)
        logger.debug("Running git", extra={"command": list(cmd), "cwd": str(self._repo_path)})
        try:
            result = subprocess.run(
                cmd,
                cwd=self._repo_path,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise GitCommandError(command=cmd, returncode=-1, stderr=str(e)) from e

        if result.returncode != 0:
            logger.warning(
                "Git command failed",
                extra={"command": list(cmd), "returncode": result.returncode},
            )
            raise GitCommandError(
                command=cmd,
                returncode=result.returncode,
                stderr=result.stderr or result.stdout,
            )
        return result.stdout

    def current_status(self) -> RepositoryStatus:
        output = self._run("status", "--porcelain", "--branch")
        lines = [line for line in output.splitlines() if line]

        current: str | None = None
        if lines and lines[0].startswith("## "):
            current = _parse_branch_header(lines[0])
            lines = lines[1:]

        return RepositoryStatus(current_branch=current, is_clean=not lines)

    def list_branches(self) -> set[str]:
        """Return local branches and remote tracking refs (e.g. ``origin/main``)."""

        # Full refnames: the short form turns into "heads/x" when a tag "x" exists.
        output = self._run("branch", "--all", "--format=%(refname)")
        branches: set[str] = set()
        for line in output.splitlines():
            ref = line.strip()
            for prefix in _BRANCH_REF_PREFIXES:
                if ref.startswith(prefix):
                    branches.add(ref[len(prefix) :])
                    break
        return branches

    def has_branch(self, name: str) -> bool:
        return name in self.list_branches()

    def stash(self) -> None:
        self._run("stash")

    def checkout(self, branch: str) -> None:
        self._run("checkout", branch)

    def checkout_new_local_branch(self, branch: str) -> None:
        self._run("checkout", "-b", branch)

    def pull(self, remote: str, branch: str) -> None:
        self._run("pull", remote, branch)

    def add_all(self) -> None:
        self._run("add", "--all")

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def push(self, remote: str, branch: str) -> None:
        self._run("push", remote, branch)
