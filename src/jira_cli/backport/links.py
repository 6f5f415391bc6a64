"""Selection of the issue linked to another one by a given link type."""

import logging
from collections.abc import Callable

from ..models.jira import JiraIssue

logger = logging.getLogger("jira-cli.backport")

# (issue, linked_issue) -> bool
LinkPolicy = Callable[[JiraIssue, JiraIssue], bool]


def accept_all(issue: JiraIssue, linked_issue: JiraIssue) -> bool:
    return True


def find_linked_issue(
    issue: JiraIssue,
    link_name: str,
    accept: LinkPolicy | None = None,
) -> JiraIssue | None:
    """
    Find the issue linked to ``issue`` by an inward link of type ``link_name``.

    Links are scanned in the order Jira returns them. Outward links and links of
    other types are skipped; only inward links embed the issue on the other end
    in a form usable here. The first candidate ``accept`` approves is returned.

    Args:
        issue: The issue whose links are inspected
        link_name: Name of the link type (e.g. 'Backports')
        accept: Policy deciding whether a candidate counts; defaults to accepting all

    Returns:
        The linked issue, or None when no accepted inward link of that type exists
    """
    accept = accept or accept_all

    for issue_link in issue.issue_links:
        if issue_link.type.name != link_name:
            continue

        if issue_link.inward_issue is None:
            continue

        linked_issue = JiraIssue.from_linked_issue(issue_link.inward_issue)
        if accept(issue, linked_issue):
            return linked_issue

        logger.debug(f"Link from {issue.key} to {linked_issue.key} not accepted")

    return None
