"""Module for Jira field and issue type operations."""

import logging
from typing import Any

from ..models.jira import JiraIssueType
from ..utils.decorators import handle_auth_errors
from .client import JiraClient
from .constants import CUSTOM_FIELD_PREFIX

logger = logging.getLogger("jira-cli.jira")


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations.

    Field IDs in Jira are crucial for many operations since they can differ across
    different Jira instances, especially for custom fields.
    """

    @handle_auth_errors("Jira API")
    def get_fields(self, refresh: bool = False) -> list[dict[str, Any]]:
        """
        Get all available fields from Jira.

        Args:
            refresh: When True, forces a refresh from the server instead of using cache

        Returns:
            List of field definitions, each with at least ``id`` and ``name``

        Raises:
            JiraCLIAuthenticationError: If authentication fails (401/403)
            TypeError: If the API returns an unexpected payload
        """
        if self._fields_cache is not None and not refresh:
            return self._fields_cache

        fields = self.jira.get_all_fields()
        if not isinstance(fields, list):
            msg = f"Unexpected return value type from `jira.get_all_fields`: {type(fields)}"
            logger.error(msg)
            raise TypeError(msg)

        self._fields_cache = fields
        logger.debug(f"Loaded {len(fields)} field definitions from Jira")
        return fields

    def get_custom_fields(self, refresh: bool = False) -> list[dict[str, Any]]:
        """
        Get all custom fields.

        Args:
            refresh: When True, forces a refresh from the server

        Returns:
            List of custom field definitions
        """
        return [
            field
            for field in self.get_fields(refresh=refresh)
            if str(field.get("id", "")).startswith(CUSTOM_FIELD_PREFIX)
        ]

    @handle_auth_errors("Jira API")
    def get_issue_types(self) -> list[JiraIssueType]:
        """
        Get all issue types known to Jira.

        Returns:
            List of JiraIssueType objects

        Raises:
            JiraCLIAuthenticationError: If authentication fails (401/403)
            TypeError: If the API returns an unexpected payload
        """
        issue_types = self.jira.get_issue_types()
        if not isinstance(issue_types, list):
            msg = f"Unexpected return value type from `jira.get_issue_types`: {type(issue_types)}"
            logger.error(msg)
            raise TypeError(msg)

        return [
            JiraIssueType.from_api_response(issue_type)
            for issue_type in issue_types
            if issue_type
        ]
