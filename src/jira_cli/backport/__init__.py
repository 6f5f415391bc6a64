"""Backporting of Jira issues into other projects."""

from .catalog import CustomFieldCatalog
from .cloner import (
    CHANGELOG_ENTRY_ISSUE_TYPE,
    DEFAULT_COPY_CUSTOM_FIELDS,
    DEFAULT_QUERY_FIELDS,
    ClonePair,
    IssueCloner,
)
from .links import LinkPolicy, accept_all, find_linked_issue

__all__ = [
    "CHANGELOG_ENTRY_ISSUE_TYPE",
    "DEFAULT_COPY_CUSTOM_FIELDS",
    "DEFAULT_QUERY_FIELDS",
    "ClonePair",
    "CustomFieldCatalog",
    "IssueCloner",
    "LinkPolicy",
    "accept_all",
    "find_linked_issue",
]
