from pprint import pformat
from typing import Any


class JiraCLIAuthenticationError(Exception):
    """Raised when Jira API authentication fails (401/403)."""

    pass


class JiraCLIError(Exception):
    """Base exception for jira-cli errors."""

    pass


class IssueCreateError(JiraCLIError):
    """Raised when Jira accepts a create request but reports field errors."""

    def __init__(self, issue_key: str, errors: Any) -> None:
        self.issue_key = issue_key
        self.errors = errors
        super().__init__(
            f'Failed to create linked issue for "{issue_key}" issue. '
            f"Errors: \n{pformat(errors)}"
        )


class IssueTypeNotFoundError(JiraCLIError, LookupError):
    """Raised when a required issue type does not exist in Jira."""

    def __init__(self, issue_type_name: str) -> None:
        self.issue_type_name = issue_type_name
        super().__init__(f'The "{issue_type_name}" issue type not found.')
