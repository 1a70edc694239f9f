"""Base client module for Jira API interactions."""

from atlassian import Jira

from ..logging_config import get_logger
from ..utils.logging import mask_sensitive
from .config import JiraConfig

logger = get_logger("jira")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ConfigurationError: If configuration is missing or invalid.
        """
        self.config = config or JiraConfig.from_env()

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )
            logger.debug(
                f"Initialized Jira client with token authentication. "
                f"URL: {self.config.url}, "
                f"Token (masked): {mask_sensitive(self.config.personal_token)}"
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
                f"Initialized Jira client with Basic authentication. "
                f"URL: {self.config.url}, Username: {self.config.username}"
            )
