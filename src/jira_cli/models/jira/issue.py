"""
Jira issue models.

This module provides the Pydantic model for Jira issues.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .common import JiraIssueType, JiraStatus
from .link import JiraIssueLink, JiraLinkedIssue

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    Besides the parsed common fields, the raw ``fields`` mapping of the API
    response is kept so custom field values can be read by their identifier.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    issue_links: list[JiraIssueLink] = Field(default_factory=list)
    fields: dict[str, Any] = Field(default_factory=dict)
    url: str | None = None

    def get_field(self, field_id: str, default: Any = None) -> Any:
        """
        Get the raw value of a field by its identifier.

        Args:
            field_id: The field identifier (e.g. 'summary' or 'customfield_10042')
            default: Value returned when the field is absent

        Returns:
            The raw field value
        """
        return self.fields.get(field_id, default)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: Additional arguments (ignored)

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields", {})
        if not isinstance(fields, dict):
            fields = {}

        status = None
        if status_data := fields.get("status"):
            status = JiraStatus.from_api_response(status_data)

        issue_type = None
        if issue_type_data := fields.get("issuetype"):
            issue_type = JiraIssueType.from_api_response(issue_type_data)

        issue_links = []
        links_data = fields.get("issuelinks", [])
        if isinstance(links_data, list):
            issue_links = [
                JiraIssueLink.from_api_response(link) for link in links_data if link
            ]

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            status=status,
            issue_type=issue_type,
            issue_links=issue_links,
            fields=fields,
            url=data.get("self"),
        )

    @classmethod
    def from_linked_issue(cls, linked_issue: JiraLinkedIssue) -> "JiraIssue":
        """
        Create a read-only issue view from the partial issue embedded in a link.

        Args:
            linked_issue: The issue embedded in an issue link

        Returns:
            A JiraIssue carrying whatever fields the link payload included
        """
        return cls(
            id=linked_issue.id,
            key=linked_issue.key,
            summary=linked_issue.summary,
            status=linked_issue.status,
            fields=dict(linked_issue.raw_fields),
            url=linked_issue.self_url,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for display."""
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
        }
        if self.url:
            result["url"] = self.url
        if self.status:
            result["status"] = self.status.to_simplified_dict()
        if self.issue_type:
            result["issue_type"] = self.issue_type.to_simplified_dict()
        if self.issue_links:
            result["issue_links"] = [
                link.to_simplified_dict() for link in self.issue_links
            ]
        return result
