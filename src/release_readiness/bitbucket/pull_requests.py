"""Module for Bitbucket pull request operations."""

from typing import Any

from ..config import MAX_PAGE_SIZE
from ..exceptions import TransportError
from ..logging_config import get_logger
from ..models.bitbucket import BitbucketPullRequest
from .client import BitbucketClient

logger = get_logger("bitbucket")

OPEN_STATE = "OPEN"
CLOSED_STATE = "MERGED"


class PullRequestsMixin(BitbucketClient):
    """Mixin for Bitbucket pull request operations.

    Supports both Bitbucket Cloud and Server/Data Center. Listing reads a
    single page of at most MAX_PAGE_SIZE pull requests.
    """

    def list_open(self, repository: str) -> list[BitbucketPullRequest]:
        """List the open pull requests of a repository."""
        return self.list_pull_requests(repository, state=OPEN_STATE)

    def list_closed(self, repository: str, limit: int) -> list[BitbucketPullRequest]:
        """List at most ``limit`` merged pull requests of a repository."""
        return self.list_pull_requests(repository, state=CLOSED_STATE, limit=limit)

    def list_pull_requests(
        self,
        repository: str,
        state: str = OPEN_STATE,
        limit: int = MAX_PAGE_SIZE,
    ) -> list[BitbucketPullRequest]:
        """
        List pull requests for a repository.

        Args:
            repository: Repository slug
            state: Filter by state (OPEN, MERGED, DECLINED)
            limit: Maximum number of pull requests to return

        Returns:
            List of BitbucketPullRequest objects

        Raises:
            TransportError: If the API request fails
        """
        limit = min(limit, MAX_PAGE_SIZE)
        if self.config.is_cloud:
            endpoint = (
                f"/2.0/repositories/{self.config.workspace}/{repository}/pullrequests"
            )
            params: dict[str, Any] = {"pagelen": limit, "state": state}
        else:
            endpoint = (
                f"/rest/api/1.0/projects/{self.config.project_key}/"
                f"repos/{repository}/pull-requests"
            )
            params = {"limit": limit, "state": state}

        logger.debug(f"Listing {state} pull requests of {repository}")
        response = self._get(endpoint, params=params)

        if not isinstance(response, dict):
            error_msg = f"Unexpected response type: {type(response).__name__}"
            logger.error(error_msg)
            raise TransportError(error_msg)

        values = response.get("values", [])
        return [
            BitbucketPullRequest.from_api_response(
                pr_data, is_cloud=self.config.is_cloud
            )
            for pr_data in values[:limit]
        ]
