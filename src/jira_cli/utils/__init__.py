"""
Utility functions for jira-cli.
This package provides helpers shared by the Jira client and the CLI.
"""

from .env import is_env_ssl_verify, parse_env_list
from .keys import is_valid_issue_key, is_valid_project_key
from .urls import is_atlassian_cloud_url

__all__ = [
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_valid_issue_key",
    "is_valid_project_key",
    "parse_env_list",
]
