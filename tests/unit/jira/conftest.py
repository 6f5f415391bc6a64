"""
Test fixtures for Jira unit tests.

This module provides Jira-specific mocks, configurations, and clients.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_cli.jira import JiraFetcher
from jira_cli.jira.client import JiraClient
from jira_cli.jira.config import JiraConfig
from tests.fixtures.jira_mocks import (
    MOCK_JIRA_FIELD_DEFINITIONS,
    MOCK_JIRA_ISSUE_TYPES,
    MOCK_JIRA_LINK_TYPES,
    MOCK_JIRA_PROJECTS,
)
from tests.utils.factories import AuthConfigFactory, JiraIssueFactory

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Returns:
        Callable: Function that creates JiraConfig instances
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://jira.example.com",
            "auth_type": "token",
            "personal_token": "test_token",
        }
        config_data = {**defaults, **overrides}
        return JiraConfig(**config_data)

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Server/Data Center configuration."""
    return jira_config_factory()


@pytest.fixture
def cloud_config(jira_config_factory):
    """Jira Cloud configuration."""
    return jira_config_factory(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test@example.com",
        api_token="test-api-token",
        personal_token=None,
    )


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_jira_environment():
    """Remove every Jira variable from the environment for the test."""
    with patch.dict(os.environ, {}, clear=False):
        for name in list(os.environ):
            if name.startswith("JIRA_"):
                del os.environ[name]
        yield


@pytest.fixture
def jira_auth_environment(clean_jira_environment):
    """Jira Cloud basic authentication environment."""
    auth_config = AuthConfigFactory.create_basic_auth_config()
    jira_env = {
        "JIRA_URL": auth_config["url"],
        "JIRA_USERNAME": auth_config["username"],
        "JIRA_API_TOKEN": auth_config["api_token"],
    }

    with patch.dict(os.environ, jira_env, clear=False):
        yield jira_env


# ============================================================================
# Mock Atlassian Client Fixtures
# ============================================================================


@pytest.fixture
def mock_atlassian_jira():
    """
    Mock of the Atlassian Jira client with canned responses.

    Returns:
        MagicMock: Configured mock Jira client
    """
    mock_jira = MagicMock()

    mock_jira.get_all_fields.return_value = MOCK_JIRA_FIELD_DEFINITIONS
    mock_jira.get_issue_types.return_value = MOCK_JIRA_ISSUE_TYPES
    mock_jira.projects.return_value = MOCK_JIRA_PROJECTS
    mock_jira.get.return_value = MOCK_JIRA_LINK_TYPES

    mock_jira.jql.return_value = {
        "issues": [
            JiraIssueFactory.create("TEST-1"),
            JiraIssueFactory.create("TEST-2"),
            JiraIssueFactory.create("TEST-3"),
        ],
        "total": 3,
        "startAt": 0,
        "maxResults": 50,
    }

    mock_jira.create_issue.return_value = {
        "id": "30000",
        "key": "XYZ-55",
        "self": "https://jira.example.com/rest/api/2/issue/30000",
    }
    mock_jira.create_issue_link.return_value = None

    return mock_jira


# ============================================================================
# Client Instance Fixtures
# ============================================================================


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """
    Create a JiraClient instance with mocked dependencies.
    """
    with patch("jira_cli.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        client = JiraClient(config=mock_config)
        yield client


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """
    Create a Server/Data Center JiraFetcher with a mocked Atlassian client.
    """
    with patch("jira_cli.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        fetcher = JiraFetcher(config=mock_config)
        yield fetcher


@pytest.fixture
def cloud_jira_fetcher(cloud_config, mock_atlassian_jira):
    """
    Create a Jira Cloud JiraFetcher with a mocked Atlassian client.
    """
    with patch("jira_cli.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        fetcher = JiraFetcher(config=cloud_config)
        yield fetcher
