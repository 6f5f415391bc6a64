"""Validation of Jira issue and project keys."""

import re

ISSUE_KEY_PATTERN = re.compile(r"^([A-Z]+-[0-9]+)$")
PROJECT_KEY_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")


def is_valid_issue_key(issue_key: str) -> bool:
    """Check if an issue key (e.g. ``PROJ-123``) is valid."""
    return bool(ISSUE_KEY_PATTERN.match(issue_key or ""))


def is_valid_project_key(project_key: str) -> bool:
    """Check if a project key (e.g. ``PROJ``) is valid."""
    return bool(PROJECT_KEY_PATTERN.match(project_key or ""))
