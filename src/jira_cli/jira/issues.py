"""Module for Jira issue operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("jira-cli.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    @handle_auth_errors("Jira API")
    def create_issue(
        self,
        project_key: str,
        summary: str,
        issue_type_id: str,
        fields: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Create a new Jira issue.

        Jira rejects invalid field values with a 400 response whose body holds
        an ``errors`` mapping. That body is returned instead of raised so callers
        can report the field errors of a create request themselves.

        Args:
            project_key: Project key
            summary: Issue summary
            issue_type_id: Issue type ID
            fields: Additional fields to set

        Returns:
            The raw create result: ``key``/``id``/``self`` on success,
            ``errors``/``errorMessages`` when Jira rejected the fields

        Raises:
            JiraCLIAuthenticationError: If authentication fails (401/403)
            HTTPError: Other HTTP errors from Jira API
        """
        all_fields = fields.copy() if fields else {}

        all_fields["project"] = {"key": project_key}
        all_fields["summary"] = summary
        all_fields["issuetype"] = {"id": issue_type_id}

        logger.debug(
            f"Creating issue in project {project_key} with fields: {sorted(all_fields)}"
        )

        try:
            response = self.jira.create_issue(fields=all_fields)
        except HTTPError as http_err:
            error_body = _error_body(http_err)
            if error_body is None:
                raise
            logger.warning(
                f"Jira rejected issue in project {project_key}: {error_body['errors']}"
            )
            return error_body

        if not isinstance(response, dict):
            msg = f"Unexpected return value type from `jira.create_issue`: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        if "key" in response:
            logger.info(f"Created issue {response['key']} in project {project_key}")
        return response


def _error_body(http_err: HTTPError) -> dict[str, Any] | None:
    """Return the JSON body of a 400 response carrying field errors."""
    response = http_err.response
    if response is None or response.status_code != 400:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and "errors" in body:
        return body
    return None
