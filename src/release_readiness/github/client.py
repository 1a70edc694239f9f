"""Base client module for GitHub API interactions."""

from typing import Any

import requests
from requests import Session

from ..exceptions import AuthenticationError, TransportError
from ..logging_config import get_logger
from ..utils.logging import mask_sensitive
from .config import GitHubConfig

logger = get_logger("github")

GITHUB_MEDIA_TYPE = "application/vnd.github+json"


class GitHubClient:
    """Base client for GitHub REST API interactions."""

    config: GitHubConfig
    session: Session

    def __init__(self, config: GitHubConfig | None = None) -> None:
        """Initialize the GitHub client.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ConfigurationError: If required settings are missing
        """
        self.config = config or GitHubConfig.from_env()

        self.session = Session()
        self.session.verify = self.config.ssl_verify
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.config.token}",
                "Accept": GITHUB_MEDIA_TYPE,
            }
        )
        logger.debug(
            f"Initialized GitHub client. URL: {self.config.url}, "
            f"Organization: {self.config.organization}, "
            f"Token (masked): {mask_sensitive(self.config.token)}"
        )

    def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request to the GitHub API.

        Args:
            endpoint: API endpoint (relative to base URL)
            params: Optional query parameters

        Returns:
            Response data (usually dict or list)

        Raises:
            AuthenticationError: If the token is rejected
            TransportError: If the request fails
        """
        url = f"{self.config.url}{endpoint}"
        try:
            response = self.session.get(url, params=params)
            if response.status_code in (401, 403):
                error_msg = f"GitHub rejected the token ({response.status_code})"
                raise AuthenticationError(error_msg)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise TransportError(f"GET {endpoint} failed: {e}") from e
