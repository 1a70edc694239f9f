"""Configuration module for Bitbucket API interactions."""

import os
from dataclasses import dataclass
from typing import Literal

from ..exceptions import ConfigurationError
from ..utils.env import get_custom_headers, is_env_ssl_verify
from ..utils.urls import strip_trailing_slash


@dataclass
class BitbucketConfig:
    """Configuration for Bitbucket API access.

    Supports two authentication methods:
    - Basic auth (username + app password)
    - Personal Access Token (PAT)

    Bitbucket Cloud addresses repositories by workspace, Bitbucket Server by
    project key.
    """

    url: str
    auth_type: Literal["basic", "pat"]
    username: str | None = None
    password: str | None = None
    personal_token: str | None = None
    workspace: str | None = None  # Cloud
    project_key: str | None = None  # Server/DC
    ssl_verify: bool = True
    custom_headers: dict[str, str] | None = None
    is_cloud: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.auth_type == "basic":
            if not self.username or not self.password:
                error_msg = "Basic authentication requires both username and password"
                raise ConfigurationError(error_msg)
        elif self.auth_type == "pat":
            if not self.personal_token:
                error_msg = "PAT authentication requires personal_token"
                raise ConfigurationError(error_msg)

        if self.is_cloud and not self.workspace:
            error_msg = "BITBUCKET_WORKSPACE is required for Bitbucket Cloud"
            raise ConfigurationError(error_msg)
        if not self.is_cloud and not self.project_key:
            error_msg = "BITBUCKET_PROJECT_KEY is required for Bitbucket Server"
            raise ConfigurationError(error_msg)

    @classmethod
    def from_env(cls) -> "BitbucketConfig":
        """Create configuration from environment variables.

        Environment variables:
            BITBUCKET_URL: Bitbucket instance URL (required)
            BITBUCKET_USERNAME: Username for basic auth
            BITBUCKET_PASSWORD: App password for basic auth
            BITBUCKET_PERSONAL_TOKEN: Personal access token
            BITBUCKET_WORKSPACE: Workspace slug (Cloud)
            BITBUCKET_PROJECT_KEY: Project key (Server)
            BITBUCKET_IS_CLOUD: Whether using Bitbucket Cloud (default: true)
            BITBUCKET_SSL_VERIFY: SSL verification setting
            BITBUCKET_CUSTOM_HEADERS: Custom HTTP headers (JSON format)

        Returns:
            BitbucketConfig instance

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        url = os.getenv("BITBUCKET_URL")
        if not url:
            error_msg = "BITBUCKET_URL environment variable is required"
            raise ConfigurationError(error_msg)

        personal_token = os.getenv("BITBUCKET_PERSONAL_TOKEN")
        username = os.getenv("BITBUCKET_USERNAME")
        password = os.getenv("BITBUCKET_PASSWORD")

        if personal_token:
            auth_type = "pat"
        elif username and password:
            auth_type = "basic"
        else:
            error_msg = (
                "No valid authentication credentials found. "
                "Provide either BITBUCKET_PERSONAL_TOKEN, or both "
                "BITBUCKET_USERNAME and BITBUCKET_PASSWORD."
            )
            raise ConfigurationError(error_msg)

        is_cloud_str = os.getenv("BITBUCKET_IS_CLOUD", "true").lower()
        is_cloud = is_cloud_str in ("true", "1", "yes")

        return cls(
            url=strip_trailing_slash(url),
            auth_type=auth_type,
            username=username,
            password=password,
            personal_token=personal_token,
            workspace=os.getenv("BITBUCKET_WORKSPACE"),
            project_key=os.getenv("BITBUCKET_PROJECT_KEY"),
            ssl_verify=is_env_ssl_verify("BITBUCKET_SSL_VERIFY"),
            custom_headers=get_custom_headers("BITBUCKET_CUSTOM_HEADERS"),
            is_cloud=is_cloud,
        )
