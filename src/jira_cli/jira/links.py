"""Module for Jira issue link operations."""

import logging
from typing import Any

from ..models.jira import JiraIssueLinkType
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("jira-cli.jira")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    @handle_auth_errors("Jira API")
    def get_issue_link_types(self) -> list[JiraIssueLinkType]:
        """
        Get all available issue link types.

        Returns:
            List of JiraIssueLinkType objects

        Raises:
            JiraCLIAuthenticationError: If authentication fails
                with the Jira API (401/403)
            TypeError: If the API returns an unexpected payload
        """
        link_types_response = self.jira.get("rest/api/2/issueLinkType")
        if not isinstance(link_types_response, dict):
            msg = (
                "Unexpected return value type from "
                f"`jira.get`: {type(link_types_response)}"
            )
            logger.error(msg)
            raise TypeError(msg)

        link_types_data = link_types_response.get("issueLinkTypes", [])

        return [
            JiraIssueLinkType.from_api_response(link_type)
            for link_type in link_types_data
        ]

    @handle_auth_errors("Jira API")
    def create_issue_link(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a link between two issues.

        Args:
            data: A dictionary containing the link data with the
                following structure:
                {
                    "type": {"name": "Backports"},
                    "inwardIssue": {"key": "XYZ-55"},
                    "outwardIssue": {"key": "ABC-1"}
                }

        Returns:
            Dictionary with the created link information

        Raises:
            ValueError: If required fields are missing
            JiraCLIAuthenticationError: If authentication fails
                with the Jira API (401/403)
            HTTPError: Other HTTP errors from Jira API
        """
        if not data.get("type") or not data["type"].get("name"):
            raise ValueError("Link type is required")
        if not data.get("inwardIssue") or not data["inwardIssue"].get("key"):
            raise ValueError("Inward issue key is required")
        if not data.get("outwardIssue") or not data["outwardIssue"].get("key"):
            raise ValueError("Outward issue key is required")

        self.jira.create_issue_link(data)

        inward = data["inwardIssue"]["key"]
        outward = data["outwardIssue"]["key"]
        logger.info(f"Linked {inward} to {outward} ({data['type']['name']})")
        return {
            "success": True,
            "message": f"Link created between {inward} and {outward}",
            "link_type": data["type"]["name"],
            "inward_issue": inward,
            "outward_issue": outward,
        }
