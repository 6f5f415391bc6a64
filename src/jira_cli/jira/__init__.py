"""Jira API module for jira-cli."""

from .client import JiraClient
from .config import JiraConfig
from .fields import FieldsMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .projects import ProjectsMixin
from .search import SearchMixin


class JiraFetcher(
    ProjectsMixin,
    FieldsMixin,
    SearchMixin,
    IssuesMixin,
    LinksMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - ProjectsMixin: Project listing
    - FieldsMixin: Field and issue type discovery
    - SearchMixin: JQL search and paginated issue walks
    - IssuesMixin: Issue creation
    - LinksMixin: Issue link types and link creation
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
