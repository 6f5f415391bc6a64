"""Module for Jira project operations."""

import logging

from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("jira-cli.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    @handle_auth_errors("Jira API")
    def get_project_keys(self) -> list[str]:
        """
        Get the keys of all projects visible to the current user.

        Returns:
            Sorted list of project keys

        Raises:
            JiraCLIAuthenticationError: If authentication fails (401/403)
            TypeError: If the API returns an unexpected payload
        """
        projects = self.jira.projects()
        if not isinstance(projects, list):
            msg = f"Unexpected return value type from `jira.projects`: {type(projects)}"
            logger.error(msg)
            raise TypeError(msg)

        return sorted(
            str(project["key"])
            for project in projects
            if isinstance(project, dict) and project.get("key")
        )
