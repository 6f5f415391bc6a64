"""
Pydantic models for Jira API data used by jira-cli.
"""

from .base import ApiModel
from .jira import (
    CustomFieldValue,
    JiraIssue,
    JiraIssueLink,
    JiraIssueLinkType,
    JiraIssueType,
    JiraLinkedIssue,
    JiraSearchResult,
    JiraStatus,
    ListFieldValue,
    OptionFieldValue,
    ScalarFieldValue,
    parse_field_value,
)

__all__ = [
    "ApiModel",
    "CustomFieldValue",
    "JiraIssue",
    "JiraIssueLink",
    "JiraIssueLinkType",
    "JiraIssueType",
    "JiraLinkedIssue",
    "JiraSearchResult",
    "JiraStatus",
    "ListFieldValue",
    "OptionFieldValue",
    "ScalarFieldValue",
    "parse_field_value",
]
