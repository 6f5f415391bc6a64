"""
Jira data models for jira-cli.

This package provides Pydantic models for the Jira API data structures the
backport workflow reads and writes.
"""

from .common import JiraIssueType, JiraStatus
from .field_value import (
    CustomFieldValue,
    ListFieldValue,
    OptionFieldValue,
    ScalarFieldValue,
    parse_field_value,
)
from .issue import JiraIssue
from .link import JiraIssueLink, JiraIssueLinkType, JiraLinkedIssue
from .search import JiraSearchResult

__all__ = [
    # Common models
    "JiraStatus",
    "JiraIssueType",
    # Entity-specific models
    "JiraIssue",
    "JiraSearchResult",
    "JiraIssueLinkType",
    "JiraIssueLink",
    "JiraLinkedIssue",
    # Custom field values
    "CustomFieldValue",
    "ScalarFieldValue",
    "ListFieldValue",
    "OptionFieldValue",
    "parse_field_value",
]
