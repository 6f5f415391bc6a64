"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue


class JiraSearchResult(ApiModel):
    """
    Model representing one page of a Jira search (JQL) result.

    Supports both Jira Cloud (v3 API) and Server/DC (v2 API) response formats:
    - Cloud: Uses nextPageToken for pagination, total=-1 (not provided)
    - Server/DC: Uses startAt for pagination, total=actual count
    """

    total: int = 0
    start_at: int = 0
    max_results: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)
    next_page_token: str | None = None

    @property
    def is_last(self) -> bool:
        """Whether this page is the last one of the result set."""
        if not self.issues:
            return True
        if self.total < 0:
            return self.next_page_token is None
        return self.start_at + len(self.issues) >= self.total

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Build one page from a ``search`` (Server/DC) or ``search/jql`` (Cloud) response.

        Counters Jira leaves out or sends malformed become -1, except
        ``startAt`` which defaults to 0.
        """
        if not data or not isinstance(data, dict):
            return cls()

        issues_data = data.get("issues")
        if not isinstance(issues_data, list):
            issues_data = []

        return cls(
            total=_as_int(data.get("total"), -1),
            start_at=_as_int(data.get("startAt"), 0),
            max_results=_as_int(data.get("maxResults"), -1),
            issues=[
                JiraIssue.from_api_response(issue) for issue in issues_data if issue
            ],
            next_page_token=data.get("nextPageToken"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "start_at": self.start_at,
            "max_results": self.max_results,
            "issues": [issue.to_simplified_dict() for issue in self.issues],
        }


def _as_int(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default
