"""Jira REST API access."""

from gjira.jira.client import Issue, JiraClient

__all__ = ["Issue", "JiraClient"]
