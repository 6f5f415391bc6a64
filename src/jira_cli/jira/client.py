"""Base client module for Jira API interactions."""

import logging

from atlassian import Jira

from .config import JiraConfig

logger = logging.getLogger("jira-cli.jira")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ValueError: If configuration is invalid.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )

        logger.debug(
            f"Jira client initialized for {self.config.url} "
            f"(auth: {self.config.auth_type}, cloud: {self.config.is_cloud})"
        )

        self._fields_cache: list[dict] | None = None
