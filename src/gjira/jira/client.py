"""Jira REST client.

Only the single call gjira needs: fetch one issue by key. Kept out of the
workflow code so tests can replace it with a mock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from gjira.errors import TrackerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Issue:
    """Minimal issue metadata fetched from Jira."""

    key: str
    summary: str


def _base_url(host: str) -> str:
    host = host.strip().rstrip("/")
    if "://" in host:
        return host
    return f"https://{host}"


class JiraClient:
    """Small wrapper around `requests` for reading Jira issues.

    TLS verification is off when `allow_insecure_tls` is set. This is the
    default used by the CLI, since self-hosted trackers commonly present
    self-signed certificates.
    """

    def __init__(
        self,
        *,
        host: str,
        username: str,
        password: str,
        api_version: str = "2",
        allow_insecure_tls: bool = False,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not host.strip():
            raise ValueError("Jira host is required")

        self._base_url = _base_url(host)
        self._api_version = api_version
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = (username, password)
        self._session.headers.update({"Accept": "application/json"})
        self._session.verify = not allow_insecure_tls

        if allow_insecure_tls:
            urllib3.disable_warnings(InsecureRequestWarning)
            logger.debug(
                "TLS certificate verification disabled", extra={"host": self._base_url}
            )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _issue_url(self, key: str) -> str:
        if not key.strip():
            raise ValueError("issue key must be non-empty")
        return f"{self._base_url}/rest/api/{self._api_version}/issue/{quote(key.strip(), safe='')}"

    def get_issue(self, key: str) -> Issue | None:
        """Fetch an issue by key. Returns None when Jira answers 404."""

        url = self._issue_url(key)
        logger.debug("Fetching issue", extra={"issue_key": key, "url": url})

        try:
            resp = self._session.get(url, params={"fields": "summary"}, timeout=self._timeout)
        except requests.RequestException as e:
            raise TrackerError(f"Could not reach {self._base_url}: {e}") from e

        if resp.status_code == 404:
            logger.info("Issue not found", extra={"issue_key": key})
            return None

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(
                "Jira request failed",
                extra={"issue_key": key, "status_code": resp.status_code},
            )
            raise TrackerError(
                f"Jira returned HTTP {resp.status_code} for issue {key}",
                status_code=resp.status_code,
            ) from e

        try:
            data: dict[str, Any] = resp.json()
        except ValueError as e:
            raise TrackerError(f"Invalid JSON in Jira response for issue {key}") from e

        fields = data.get("fields") if isinstance(data, dict) else None
        summary = fields.get("summary") if isinstance(fields, dict) else None
        if not isinstance(summary, str):
            raise TrackerError(f"Invalid issue response for {key}: missing summary")

        issue_key = data.get("key")
        if not isinstance(issue_key, str) or not issue_key.strip():
            issue_key = key

        return Issue(key=issue_key, summary=summary)

    def close(self) -> None:
        self._session.close()
