"""Module for Jira search operations.

Two deployment types are supported:

**Cloud (API v3 - /rest/api/3/search/jql):**
- POST with a JSON body
- Pagination via nextPageToken (sequential only), total=-1
- Requires non-empty JQL
- Up to 100 issues per request

**Server/DC (API v2 - /rest/api/2/search):**
- GET with query parameters
- Pagination via startAt, actual total count
- Up to 50 issues per request
"""

import logging
from collections.abc import Iterable, Iterator

from ..models.jira import JiraIssue, JiraSearchResult
from ..utils.decorators import handle_auth_errors
from .client import JiraClient
from .constants import CLOUD_MAX_RESULTS, DEFAULT_READ_JIRA_FIELDS, SERVER_MAX_RESULTS

logger = logging.getLogger("jira-cli.jira")


def _fields_param(fields: Iterable[str] | str | None) -> str:
    if fields is None:
        return ",".join(DEFAULT_READ_JIRA_FIELDS)
    if isinstance(fields, str):
        return fields
    return ",".join(fields)


class SearchMixin(JiraClient):
    """Mixin providing JQL search operations for Jira issues."""

    @handle_auth_errors("Jira API")
    def search_issues(
        self,
        jql: str,
        fields: Iterable[str] | str | None = None,
        start: int = 0,
        limit: int = SERVER_MAX_RESULTS,
        next_page_token: str | None = None,
    ) -> JiraSearchResult:
        """
        Fetch a single page of issues matching a JQL query.

        Args:
            jql: JQL query string (e.g., "project = ABC AND status = Done")
            fields: Fields to return; None uses DEFAULT_READ_JIRA_FIELDS, a string
                is sent as-is, any other iterable is joined with commas
            start: Offset of the page (Server/DC only)
            limit: Maximum issues in the page
            next_page_token: Token of the page to fetch (Cloud only)

        Returns:
            JiraSearchResult with the page's issues and pagination data

        Raises:
            ValueError: Empty JQL query on Cloud deployment
            JiraCLIAuthenticationError: Authentication failed (401/403 status)
            TypeError: Unexpected API response type
            HTTPError: Other HTTP errors from Jira API
        """
        fields_param = _fields_param(fields)

        if self.config.is_cloud:
            if not jql or not jql.strip():
                raise ValueError("JQL query cannot be empty for Jira Cloud API v3")

            request_body: dict = {
                "jql": jql,
                "maxResults": min(limit, CLOUD_MAX_RESULTS),
                "fields": fields_param.split(",") if fields_param else ["id"],
            }
            if next_page_token:
                request_body["nextPageToken"] = next_page_token

            response = self.jira.post("rest/api/3/search/jql", json=request_body)
            if not isinstance(response, dict):
                msg = f"Unexpected return value type from v3 search API: {type(response)}"
                logger.error(msg)
                raise TypeError(msg)

            # v3 doesn't provide total or startAt
            response = {**response, "total": -1, "startAt": 0}
        else:
            response = self.jira.jql(
                jql,
                fields=fields_param,
                start=start,
                limit=min(limit, SERVER_MAX_RESULTS),
            )
            if not isinstance(response, dict):
                msg = f"Unexpected return value type from `jira.jql`: {type(response)}"
                logger.error(msg)
                raise TypeError(msg)

        return JiraSearchResult.from_api_response(response)

    def iter_issues(
        self,
        jql: str,
        fields: Iterable[str] | str | None = None,
        page_size: int = SERVER_MAX_RESULTS,
    ) -> Iterator[JiraIssue]:
        """
        Lazily walk every issue matching a JQL query.

        Pages are fetched on demand as the caller consumes issues, in the order
        Jira returns them. The iterator cannot be restarted; call again for a
        fresh walk.

        Args:
            jql: JQL query string
            fields: Fields to return for each issue
            page_size: Issues requested per page

        Yields:
            JiraIssue objects
        """
        start = 0
        next_page_token = None
        page_number = 0

        while True:
            page = self.search_issues(
                jql,
                fields=fields,
                start=start,
                limit=page_size,
                next_page_token=next_page_token,
            )
            page_number += 1
            logger.debug(
                f"Search page {page_number} for '{jql}' returned {len(page.issues)} issues"
            )

            yield from page.issues

            if page.is_last:
                return

            start = page.start_at + len(page.issues)
            next_page_token = page.next_page_token
