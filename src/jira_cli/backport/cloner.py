"""Creation of backport issues for the results of a JQL query.

For every issue matching a query, the cloner finds the issue already linked
to it by a given link type. Issues without such a link can then be backported:
a "Changelog Entry" issue is created in the target project, selected custom
fields are copied onto it, and it is linked back to the original issue.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol

from ..exceptions import IssueCreateError, IssueTypeNotFoundError
from ..jira.config import DEFAULT_COPY_CUSTOM_FIELDS
from ..models.constants import UNKNOWN
from ..models.jira import JiraIssue, JiraIssueType, parse_field_value
from .catalog import CustomFieldCatalog
from .links import LinkPolicy, accept_all, find_linked_issue

logger = logging.getLogger("jira-cli.backport")

CHANGELOG_ENTRY_ISSUE_TYPE = "Changelog Entry"

DEFAULT_QUERY_FIELDS: tuple[str, ...] = ("summary", "issuelinks")

# (issue, linked issue or None)
ClonePair = tuple[JiraIssue, JiraIssue | None]


class BackportClient(Protocol):
    """The Jira operations the cloner relies on."""

    def get_fields(self) -> list[dict[str, Any]]: ...

    def get_issue_types(self) -> list[JiraIssueType]: ...

    def iter_issues(
        self, jql: str, fields: Iterable[str] | str | None = None
    ) -> Iterator[JiraIssue]: ...

    def create_issue(
        self,
        project_key: str,
        summary: str,
        issue_type_id: str,
        fields: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...

    def create_issue_link(self, data: dict[str, Any]) -> dict[str, Any]: ...


class IssueCloner:
    """Finds issues needing a backport and creates the backport issues.

    Args:
        jira: Jira client used for every remote call
        copy_custom_fields: Display names of the custom fields copied onto
            backports. Names unknown to Jira are ignored.
        is_link_accepted: Policy deciding whether a linked issue counts as the
            backport of an issue. Defaults to accepting every link.
        is_already_processed: Policy deciding whether an issue with a backport
            is left out of the query results. Defaults to leaving all of them out.
    """

    def __init__(
        self,
        jira: BackportClient,
        copy_custom_fields: Sequence[str] = DEFAULT_COPY_CUSTOM_FIELDS,
        is_link_accepted: LinkPolicy | None = None,
        is_already_processed: LinkPolicy | None = None,
    ) -> None:
        self.jira = jira
        self.copy_custom_fields = tuple(copy_custom_fields)
        self.is_link_accepted = is_link_accepted or accept_all
        self.is_already_processed = is_already_processed or accept_all

        self.custom_fields = CustomFieldCatalog(jira)
        self._changelog_entry_issue_type_id: str | None = None

    def get_issues(self, jql: str, link_name: str) -> list[ClonePair]:
        """
        Return the issues matching ``jql`` that are not processed yet.

        Each issue is paired with the issue linked to it by ``link_name``, or
        None when it has no such link.
        """
        return list(self.iter_issues(jql, link_name))

    def iter_issues(self, jql: str, link_name: str) -> Iterator[ClonePair]:
        """Lazy version of get_issues; pages are fetched as pairs are consumed."""
        query_fields = self.get_query_fields()
        logger.debug(f"Searching '{jql}' with fields {query_fields}")

        for issue in self.jira.iter_issues(jql, fields=query_fields):
            linked_issue = find_linked_issue(
                issue, link_name, accept=self.is_link_accepted
            )

            if linked_issue is not None and self.is_already_processed(
                issue, linked_issue
            ):
                logger.debug(
                    f"Skipping {issue.key}: already linked to {linked_issue.key}"
                )
                continue

            yield issue, linked_issue

    def get_query_fields(self) -> list[str]:
        """Fields requested for every searched issue."""
        return [
            *DEFAULT_QUERY_FIELDS,
            *self.custom_fields.resolve_many(self.copy_custom_fields).values(),
        ]

    def create_linked_issue(
        self,
        issue: JiraIssue,
        project_key: str,
        link_name: str,
        component_ids: Iterable[str | int],
    ) -> str:
        """
        Create the backport of ``issue`` in ``project_key`` and link it back.

        The link is created only after the issue was created successfully. If
        linking fails, the new issue stays in Jira unlinked.

        Args:
            issue: Original issue
            project_key: Key of the project receiving the backport
            link_name: Name of the link type between backport and original
            component_ids: IDs of the components set on the backport

        Returns:
            Key of the created issue

        Raises:
            IssueTypeNotFoundError: When Jira has no "Changelog Entry" issue type
            IssueCreateError: When Jira reports errors for the create request
        """
        create_fields: dict[str, Any] = {
            "description": f"See {issue.key}.",
            "components": [{"id": component_id} for component_id in component_ids],
        }

        for field_id in self.custom_fields.resolve_many(
            self.copy_custom_fields
        ).values():
            create_fields[field_id] = self.get_issue_custom_field(issue, field_id)

        create_issue_result = self.jira.create_issue(
            project_key,
            issue.summary,
            self.get_changelog_entry_issue_type_id(),
            create_fields,
        )

        if "errors" in create_issue_result:
            raise IssueCreateError(issue.key, create_issue_result["errors"])

        new_issue_key = create_issue_result["key"]
        logger.info(f"Created {new_issue_key} as backport of {issue.key}")

        self.jira.create_issue_link(
            {
                "type": {"name": link_name},
                "inwardIssue": {"key": new_issue_key},
                "outwardIssue": {"key": issue.key},
            }
        )

        return new_issue_key

    def get_changelog_entry_issue_type_id(self) -> str:
        """
        Return the ID of the "Changelog Entry" issue type.

        Looked up once per cloner.

        Raises:
            IssueTypeNotFoundError: When the issue type does not exist
        """
        if self._changelog_entry_issue_type_id is None:
            for issue_type in self.jira.get_issue_types():
                if issue_type.name == CHANGELOG_ENTRY_ISSUE_TYPE:
                    self._changelog_entry_issue_type_id = issue_type.id
                    break
            else:
                raise IssueTypeNotFoundError(CHANGELOG_ENTRY_ISSUE_TYPE)

        return self._changelog_entry_issue_type_id

    def get_issue_custom_field(self, issue: JiraIssue, field_id: str) -> Any:
        """Return a custom field value of ``issue`` in the shape Jira accepts on create."""
        return parse_field_value(issue.get_field(field_id)).to_write_value()

    def get_issue_status_name(self, issue: JiraIssue) -> str:
        """Return the status name of ``issue``."""
        if issue.status is None:
            return UNKNOWN
        return issue.status.name
