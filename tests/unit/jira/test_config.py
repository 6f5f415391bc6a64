"""Tests for the Jira config module."""

import os
from unittest.mock import patch

import pytest

from jira_cli.jira.config import DEFAULT_COPY_CUSTOM_FIELDS, JiraConfig


def test_from_env_basic_auth(jira_auth_environment):
    """Test that from_env correctly loads basic auth configuration."""
    config = JiraConfig.from_env()
    assert config.url == "https://test.atlassian.net"
    assert config.auth_type == "basic"
    assert config.username == "test@example.com"
    assert config.api_token == "test-api-token"
    assert config.is_cloud is True
    assert config.ssl_verify is True
    assert config.copy_custom_fields == DEFAULT_COPY_CUSTOM_FIELDS


def test_from_env_token_auth(clean_jira_environment):
    """Test that from_env correctly loads token auth configuration."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.example.com",
            "JIRA_PERSONAL_TOKEN": "test_personal_token",
            "JIRA_SSL_VERIFY": "false",
        },
    ):
        config = JiraConfig.from_env()
        assert config.auth_type == "token"
        assert config.personal_token == "test_personal_token"
        assert config.is_cloud is False
        assert config.ssl_verify is False


def test_from_env_server_basic_auth(clean_jira_environment):
    """Server/DC falls back to basic auth when no personal token is set."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.example.com",
            "JIRA_USERNAME": "user",
            "JIRA_API_TOKEN": "password",
        },
    ):
        config = JiraConfig.from_env()
        assert config.auth_type == "basic"


def test_from_env_missing_url(clean_jira_environment):
    """Test that from_env raises ValueError when URL is missing."""
    with pytest.raises(ValueError, match="Missing required JIRA_URL"):
        JiraConfig.from_env()


def test_from_env_cloud_missing_credentials(clean_jira_environment):
    """Cloud needs username and API token."""
    with patch.dict(os.environ, {"JIRA_URL": "https://test.atlassian.net"}):
        with pytest.raises(ValueError, match="Cloud authentication requires"):
            JiraConfig.from_env()


def test_from_env_server_missing_credentials(clean_jira_environment):
    """Server/DC needs a personal token or basic credentials."""
    with patch.dict(os.environ, {"JIRA_URL": "https://jira.example.com"}):
        with pytest.raises(ValueError, match="requires JIRA_PERSONAL_TOKEN"):
            JiraConfig.from_env()


def test_from_env_copy_fields(jira_auth_environment):
    """The copied custom fields can be configured as a comma-separated list."""
    with patch.dict(
        os.environ, {"JIRA_BACKPORT_COPY_FIELDS": "Release Note, Story Points ,"}
    ):
        config = JiraConfig.from_env()
    assert config.copy_custom_fields == ("Release Note", "Story Points")


def test_is_cloud():
    """Test that is_cloud property returns correct value."""
    config = JiraConfig(url="https://example.atlassian.net", auth_type="basic")
    assert config.is_cloud is True

    config = JiraConfig(url="https://jira.example.com", auth_type="token")
    assert config.is_cloud is False

    config = JiraConfig(url="http://localhost:8080", auth_type="token")
    assert config.is_cloud is False
