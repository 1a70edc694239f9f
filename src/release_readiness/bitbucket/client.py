"""Base client module for Bitbucket API interactions."""

from typing import Any

import requests
from requests import Session

from ..exceptions import AuthenticationError, TransportError
from ..logging_config import get_logger
from ..utils.logging import mask_sensitive
from .config import BitbucketConfig

logger = get_logger("bitbucket")


class BitbucketClient:
    """Base client for Bitbucket API interactions."""

    config: BitbucketConfig
    session: Session

    def __init__(self, config: BitbucketConfig | None = None) -> None:
        """Initialize the Bitbucket client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ConfigurationError: If configuration is invalid or required credentials are missing
        """
        self.config = config or BitbucketConfig.from_env()

        self.session = Session()
        self.session.verify = self.config.ssl_verify

        if self.config.auth_type == "pat":
            # Cloud takes a Bearer token, Server takes the token as basic auth password
            if self.config.is_cloud:
                self.session.headers.update(
                    {
                        "Authorization": f"Bearer {self.config.personal_token}",
                        "Accept": "application/json",
                    }
                )
                logger.debug(
                    f"Initialized Bitbucket Cloud client with PAT authentication. "
                    f"URL: {self.config.url}, "
                    f"Token (masked): {mask_sensitive(self.config.personal_token)}"
                )
            else:
                self.session.auth = ("x-token-auth", self.config.personal_token)
                self.session.headers.update({"Accept": "application/json"})
                logger.debug(
                    f"Initialized Bitbucket Server client with PAT authentication. "
                    f"URL: {self.config.url}"
                )

        else:  # basic auth
            self.session.auth = (self.config.username, self.config.password)
            self.session.headers.update({"Accept": "application/json"})
            logger.debug(
                f"Initialized Bitbucket client with Basic authentication. "
                f"URL: {self.config.url}, Username: {self.config.username}"
            )

        if self.config.custom_headers:
            self.session.headers.update(self.config.custom_headers)

    def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request to the Bitbucket API.

        Args:
            endpoint: API endpoint (relative to base URL)
            params: Optional query parameters

        Returns:
            Response data (usually dict or list)

        Raises:
            AuthenticationError: If the credentials are rejected
            TransportError: If the request fails
        """
        url = f"{self.config.url}{endpoint}"
        try:
            response = self.session.get(url, params=params)
            if response.status_code in (401, 403):
                error_msg = (
                    f"Bitbucket rejected the credentials ({response.status_code})"
                )
                raise AuthenticationError(error_msg)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise TransportError(f"GET {endpoint} failed: {e}") from e
