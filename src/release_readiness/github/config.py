"""Configuration module for GitHub API interactions."""

import os
from dataclasses import dataclass

from ..exceptions import ConfigurationError
from ..utils.env import is_env_ssl_verify
from ..utils.urls import strip_trailing_slash

DEFAULT_GITHUB_URL = "https://api.github.com"


@dataclass
class GitHubConfig:
    """GitHub API configuration.

    Repositories are addressed as ``{organization}/{repository}``.
    """

    token: str
    organization: str
    url: str = DEFAULT_GITHUB_URL  # REST API root, differs on GitHub Enterprise
    ssl_verify: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.token:
            error_msg = "GitHub authentication requires a token"
            raise ConfigurationError(error_msg)
        if not self.organization:
            error_msg = "GitHub organization is required"
            raise ConfigurationError(error_msg)

    @classmethod
    def from_env(cls) -> "GitHubConfig":
        """Create configuration from environment variables.

        Environment variables:
            GITHUB_TOKEN: Personal access or OAuth token (required)
            GITHUB_ORGANIZATION: Owner of the audited repositories (required)
            GITHUB_URL: API root (default: https://api.github.com)
            GITHUB_SSL_VERIFY: SSL verification setting

        Returns:
            GitHubConfig instance

        Raises:
            ConfigurationError: If required configuration is missing
        """
        token = os.getenv("GITHUB_TOKEN")
        if not token:
            error_msg = "GITHUB_TOKEN environment variable is required"
            raise ConfigurationError(error_msg)

        organization = os.getenv("GITHUB_ORGANIZATION")
        if not organization:
            error_msg = "GITHUB_ORGANIZATION environment variable is required"
            raise ConfigurationError(error_msg)

        return cls(
            token=token,
            organization=organization,
            url=strip_trailing_slash(os.getenv("GITHUB_URL") or DEFAULT_GITHUB_URL),
            ssl_verify=is_env_ssl_verify("GITHUB_SSL_VERIFY"),
        )
