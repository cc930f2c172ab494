"""Issue-driven branch and push workflow.

The two sequences gjira automates:

- create-branch: given an issue key, switch to a branch of that name, creating
  it from a freshly pulled base branch when it does not exist yet;
- push: commit everything on the current branch with a message built from the
  matching issue summary and push it.

Domain results are returned as outcomes. Tracker and git failures propagate as
`gjira.errors.GjiraError` subclasses and stop the sequence where it is; steps
already done (a stash, for instance) are not undone.
"""

from __future__ import annotations

import logging
from enum import Enum

from gjira.console import Console
from gjira.git.adapter import GitAdapter
from gjira.jira.client import JiraClient

logger = logging.getLogger(__name__)


class BranchOutcome(str, Enum):
    CREATED = "created"
    SWITCHED = "switched"
    ALREADY_ON_BRANCH = "already_on_branch"
    ISSUE_NOT_FOUND = "issue_not_found"


class PushOutcome(str, Enum):
    PUSHED = "pushed"
    ISSUE_NOT_FOUND = "issue_not_found"
    DETACHED_HEAD = "detached_head"


def commit_message(branch: str, summary: str) -> str:
    return f"{branch} - {summary}"


class IssueWorkflow:
    """Drives git and the tracker for one command."""

    def __init__(
        self,
        *,
        jira: JiraClient,
        git: GitAdapter,
        default_branch: str,
        remote: str = "origin",
        console: Console | None = None,
    ) -> None:
        if not default_branch.strip():
            raise ValueError("default_branch is required")

        self._jira = jira
        self._git = git
        self._default_branch = default_branch
        self._remote = remote
        self._console = console or Console()

    def create_branch(self, key: str) -> BranchOutcome:
        """Check out the branch for issue `key`, creating it if needed."""

        issue = self._jira.get_issue(key)
        if issue is None:
            self._console.error(f"Issue {key} not found")
            return BranchOutcome.ISSUE_NOT_FOUND
        self._console.info(f"{key}: {issue.summary}")

        status = self._git.current_status()
        if status.current_branch == key:
            self._console.info(f"Already on branch {key}")
            return BranchOutcome.ALREADY_ON_BRANCH

        self._console.info("Stashing local changes")
        self._git.stash()

        if self._git.has_branch(key):
            self._console.info(f"Checking out {key}")
            self._git.checkout(key)
            logger.info("Switched to existing branch", extra={"branch": key})
            return BranchOutcome.SWITCHED

        base = self._default_branch
        self._console.info(f"Checking out {base}")
        self._git.checkout(base)
        self._console.info(f"Pulling {base} from {self._remote}")
        self._git.pull(self._remote, base)
        self._console.info(f"Checking out new branch {key}")
        self._git.checkout_new_local_branch(key)
        logger.info("Created branch", extra={"branch": key, "base": base})
        return BranchOutcome.CREATED

    def push(self) -> PushOutcome:
        """Commit all changes on the current branch and push them."""

        status = self._git.current_status()
        branch = status.current_branch
        if branch is None:
            self._console.error("Not on a branch (detached HEAD)")
            return PushOutcome.DETACHED_HEAD

        issue = self._jira.get_issue(branch)
        if issue is None:
            self._console.error(f"Unknown issue {branch}")
            return PushOutcome.ISSUE_NOT_FOUND

        message = commit_message(branch, issue.summary)
        self._console.info(f"Committing {message}")
        self._git.add_all()
        self._git.commit(message)

        self._console.info(f"Pushing to {self._remote} {branch}")
        self._git.push(self._remote, branch)
        logger.info("Pushed branch", extra={"branch": branch, "remote": self._remote})
        self._console.success("DONE")
        return PushOutcome.PUSHED
