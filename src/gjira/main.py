"""CLI entrypoint for gjira.

    gjira              show the menu
    gjira configure    run the configuration wizard
    gjira push         commit everything and push the current branch
    gjira PROJ-42      check out (or create) the branch for issue PROJ-42
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from gjira import __version__
from gjira.config import GjiraSettings, TrackerSettings
from gjira.console import Console
from gjira.errors import GjiraError
from gjira.git.adapter import GitAdapter
from gjira.jira.client import JiraClient
from gjira.logging import configure_logging
from gjira.settings_store import SettingsStore
from gjira.wizard import ConfigurationWizard
from gjira.workflow import BranchOutcome, IssueWorkflow, PushOutcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_NOT_FOUND = 3

CONFIGURE = "configure"
PUSH = "push"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gjira",
        description="Create git branches from Jira issues and push with issue-based commit messages",
    )
    parser.add_argument("--version", action="version", version=f"gjira {__version__}")
    parser.add_argument(
        "action",
        nargs="?",
        default=None,
        help=f"'{CONFIGURE}', '{PUSH}', or an issue key such as PROJ-42",
    )
    parser.add_argument(
        "argument",
        nargs="?",
        default=None,
        help="ignored; accepted so existing scripts passing a second word keep working",
    )
    return parser


def show_menu(console: Console) -> None:
    # TODO: replace with an interactive picker over the user's open issues.
    console.plain("Usage:")
    console.plain(f"  gjira {CONFIGURE:<10} set tracker host, credentials and default branch")
    console.plain(f"  gjira {PUSH:<10} commit all changes and push the current branch")
    console.plain(f"  gjira {'<ISSUE>':<10} check out or create the branch for an issue")


def ensure_configured(
    tracker: TrackerSettings, wizard: ConfigurationWizard, console: Console
) -> TrackerSettings:
    if tracker.is_complete:
        return tracker
    console.warn("You need to setup GJIRA first")
    return wizard.run(tracker)


def run_action(
    action: str,
    *,
    settings: GjiraSettings,
    tracker: TrackerSettings,
    console: Console,
) -> int:
    jira = JiraClient(
        host=tracker.host,
        username=tracker.username,
        password=tracker.password,
        api_version=settings.api_version,
        allow_insecure_tls=settings.allow_insecure_tls,
        timeout=settings.request_timeout,
    )
    try:
        workflow = IssueWorkflow(
            jira=jira,
            git=GitAdapter(binary=settings.git_binary),
            default_branch=tracker.default_branch,
            remote=settings.remote,
            console=console,
        )

        if action == PUSH:
            pushed = workflow.push()
            return EXIT_OK if pushed is PushOutcome.PUSHED else EXIT_NOT_FOUND

        branched = workflow.create_branch(action)
        if branched is BranchOutcome.ISSUE_NOT_FOUND:
            return EXIT_NOT_FOUND
        return EXIT_OK
    finally:
        jira.close()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.action is not None and not args.action.strip():
        parser.error("action must not be blank")

    try:
        settings = GjiraSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check GJIRA_* variables or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(settings.log_level)

    console = Console()
    console.banner(__version__)

    store = SettingsStore(settings.config_path)
    wizard = ConfigurationWizard(store, console=console)

    try:
        tracker = store.load()

        if args.action == CONFIGURE:
            wizard.run(tracker)
            return EXIT_OK

        tracker = ensure_configured(tracker, wizard, console)

        if args.action is None:
            show_menu(console)
            return EXIT_OK

        return run_action(args.action, settings=settings, tracker=tracker, console=console)

    except GjiraError as e:
        logger.error("Command failed", extra={"action": args.action, "error": str(e)})
        console.fatal(str(e))
        return EXIT_FAILURE

    except Exception as e:
        logger.exception("Command failed")
        console.fatal(str(e) or type(e).__name__)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
