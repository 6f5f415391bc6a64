"""
Jira issue link models.

Jira returns the links of an issue under the ``issuelinks`` field. Each link
embeds a partial representation of the other issue under ``inwardIssue`` or
``outwardIssue``, depending on the link direction.
"""

import logging
from typing import Any, Literal

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY, UNKNOWN
from .common import JiraStatus

logger = logging.getLogger(__name__)


class JiraIssueLinkType(ApiModel):
    """
    Model representing a Jira issue link type.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    inward: str = EMPTY_STRING
    outward: str = EMPTY_STRING
    self_url: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueLinkType":
        """
        Create a JiraIssueLinkType from a Jira API response.

        Args:
            data: The issue link type data from the Jira API

        Returns:
            A JiraIssueLinkType instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", UNKNOWN)),
            inward=str(data.get("inward", EMPTY_STRING)),
            outward=str(data.get("outward", EMPTY_STRING)),
            self_url=data.get("self"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result = {
            "id": self.id,
            "name": self.name,
            "inward": self.inward,
            "outward": self.outward,
        }
        if self.self_url:
            result["self"] = self.self_url
        return result


class JiraLinkedIssue(ApiModel):
    """
    Model representing the partial issue embedded in an issue link.

    Only key, summary and status are guaranteed; the full field data of the
    linked issue is not part of the link payload.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: JiraStatus | None = None
    self_url: str | None = None
    raw_fields: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraLinkedIssue":
        """
        Create a JiraLinkedIssue from the ``inwardIssue``/``outwardIssue`` payload.

        Args:
            data: The embedded issue data from the Jira API

        Returns:
            A JiraLinkedIssue instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        fields = data.get("fields", {})
        if not isinstance(fields, dict):
            fields = {}

        status = None
        if status_data := fields.get("status"):
            status = JiraStatus.from_api_response(status_data)

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary", EMPTY_STRING)),
            status=status,
            self_url=data.get("self"),
            raw_fields=fields,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
        }
        if self.status:
            result["status"] = self.status.to_simplified_dict()
        return result


class JiraIssueLink(ApiModel):
    """
    Model representing a directional link between two issues.
    """

    id: str = JIRA_DEFAULT_ID
    type: JiraIssueLinkType = Field(default_factory=JiraIssueLinkType)
    inward_issue: JiraLinkedIssue | None = None
    outward_issue: JiraLinkedIssue | None = None

    @property
    def direction(self) -> Literal["inward", "outward"]:
        """Direction of the link, derived from which issue reference is embedded."""
        return "inward" if self.inward_issue is not None else "outward"

    @property
    def linked_issue(self) -> JiraLinkedIssue | None:
        """The embedded issue on the other end of the link."""
        return self.inward_issue or self.outward_issue

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueLink":
        """
        Create a JiraIssueLink from an entry of the ``issuelinks`` field.

        Args:
            data: The issue link data from the Jira API

        Returns:
            A JiraIssueLink instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        inward_issue = None
        if inward_data := data.get("inwardIssue"):
            inward_issue = JiraLinkedIssue.from_api_response(inward_data)

        outward_issue = None
        if outward_data := data.get("outwardIssue"):
            outward_issue = JiraLinkedIssue.from_api_response(outward_data)

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            type=JiraIssueLinkType.from_api_response(data.get("type", {})),
            inward_issue=inward_issue,
            outward_issue=outward_issue,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "type": self.type.to_simplified_dict(),
            "direction": self.direction,
        }
        if self.inward_issue:
            result["inward_issue"] = self.inward_issue.to_simplified_dict()
        if self.outward_issue:
            result["outward_issue"] = self.outward_issue.to_simplified_dict()
        return result
