"""Tests for the Jira Links mixin."""

from unittest.mock import MagicMock

import pytest
from requests.exceptions import HTTPError

from jira_cli.models.jira import JiraIssueLinkType


class TestLinksMixin:
    """Tests for the LinksMixin class."""

    def test_create_issue_link_basic(self, jira_fetcher):
        """Test basic functionality of create_issue_link."""
        link_data = {
            "type": {"name": "Backports"},
            "inwardIssue": {"key": "XYZ-55"},
            "outwardIssue": {"key": "ABC-1"},
        }

        result = jira_fetcher.create_issue_link(link_data)

        jira_fetcher.jira.create_issue_link.assert_called_once_with(link_data)
        assert result["success"] is True
        assert result["link_type"] == "Backports"
        assert result["inward_issue"] == "XYZ-55"
        assert result["outward_issue"] == "ABC-1"

    @pytest.mark.parametrize(
        ("link_data", "message"),
        [
            (
                {"inwardIssue": {"key": "A-1"}, "outwardIssue": {"key": "B-1"}},
                "Link type is required",
            ),
            (
                {"type": {"name": "Backports"}, "outwardIssue": {"key": "B-1"}},
                "Inward issue key is required",
            ),
            (
                {"type": {"name": "Backports"}, "inwardIssue": {"key": "A-1"}},
                "Outward issue key is required",
            ),
        ],
    )
    def test_create_issue_link_missing_data(self, jira_fetcher, link_data, message):
        """Incomplete link data is rejected before any request."""
        with pytest.raises(ValueError, match=message):
            jira_fetcher.create_issue_link(link_data)

        jira_fetcher.jira.create_issue_link.assert_not_called()

    def test_create_issue_link_http_error(self, jira_fetcher):
        """Transport errors of the link request propagate unchanged."""
        http_error = HTTPError("Server Error", response=MagicMock(status_code=500))
        jira_fetcher.jira.create_issue_link.side_effect = http_error

        with pytest.raises(HTTPError) as exc_info:
            jira_fetcher.create_issue_link(
                {
                    "type": {"name": "Backports"},
                    "inwardIssue": {"key": "XYZ-55"},
                    "outwardIssue": {"key": "ABC-1"},
                }
            )
        assert exc_info.value is http_error

    def test_get_issue_link_types(self, jira_fetcher):
        """Link types are parsed into models."""
        link_types = jira_fetcher.get_issue_link_types()

        jira_fetcher.jira.get.assert_called_once_with("rest/api/2/issueLinkType")
        assert all(isinstance(lt, JiraIssueLinkType) for lt in link_types)
        assert link_types[0].name == "Backports"
        assert link_types[0].inward == "is backported by"

    def test_get_issue_link_types_unexpected_type(self, jira_fetcher):
        """A non-dict payload is rejected."""
        jira_fetcher.jira.get.return_value = "nope"

        with pytest.raises(TypeError):
            jira_fetcher.get_issue_link_types()
