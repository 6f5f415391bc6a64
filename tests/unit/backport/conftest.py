"""
Test fixtures for the backport workflow.

The Jira client is replaced by a MagicMock restricted to the JiraFetcher API,
so every remote call can be counted and inspected.
"""

from unittest.mock import MagicMock

import pytest

from jira_cli.jira import JiraFetcher
from jira_cli.models.jira import JiraIssue, JiraIssueType
from tests.fixtures.jira_mocks import MOCK_JIRA_FIELD_DEFINITIONS, MOCK_JIRA_ISSUE_TYPES
from tests.utils.factories import JiraIssueFactory


@pytest.fixture
def make_issue():
    """
    Factory fixture building JiraIssue models from factory payloads.

    Example:
        issue = make_issue("ABC-1", fields={"issuelinks": [...]})
    """

    def _make_issue(key: str = "ABC-1", **overrides) -> JiraIssue:
        return JiraIssue.from_api_response(JiraIssueFactory.create(key, **overrides))

    return _make_issue


@pytest.fixture
def mock_jira():
    """
    Mock Jira client with the field schema, issue types and a successful create.

    Set ``mock_jira.search_results`` to the issues the next search yields.
    """
    mock = MagicMock(spec=JiraFetcher)
    mock.search_results = []

    mock.get_fields.return_value = MOCK_JIRA_FIELD_DEFINITIONS
    mock.get_issue_types.return_value = [
        JiraIssueType.from_api_response(issue_type)
        for issue_type in MOCK_JIRA_ISSUE_TYPES
    ]
    mock.iter_issues.side_effect = lambda jql, fields=None: iter(mock.search_results)
    mock.create_issue.return_value = {
        "id": "30000",
        "key": "XYZ-55",
        "self": "https://jira.example.com/rest/api/2/issue/30000",
    }
    mock.create_issue_link.return_value = {"success": True}

    return mock
