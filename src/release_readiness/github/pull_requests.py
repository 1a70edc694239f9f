"""Module for GitHub pull request operations."""

from ..config import MAX_PAGE_SIZE
from ..exceptions import TransportError
from ..logging_config import get_logger
from ..models.github import GitHubPullRequest
from .client import GitHubClient

logger = get_logger("github")


class PullRequestsMixin(GitHubClient):
    """Mixin for GitHub pull request operations.

    Listing reads a single page of at most MAX_PAGE_SIZE pull requests.
    """

    def list_open(self, repository: str) -> list[GitHubPullRequest]:
        """List the open pull requests of a repository."""
        return self.list_pull_requests(repository, state="open")

    def list_closed(self, repository: str, limit: int) -> list[GitHubPullRequest]:
        """List at most ``limit`` recently closed pull requests of a repository."""
        return self.list_pull_requests(repository, state="closed", limit=limit)

    def list_pull_requests(
        self, repository: str, state: str = "open", limit: int = MAX_PAGE_SIZE
    ) -> list[GitHubPullRequest]:
        """
        List pull requests for a repository of the configured organization.

        Args:
            repository: Repository name
            state: open, closed or all
            limit: Maximum number of pull requests to return

        Returns:
            List of GitHubPullRequest objects, most recently updated first for
            closed ones

        Raises:
            TransportError: If the API request fails
        """
        limit = min(limit, MAX_PAGE_SIZE)
        endpoint = f"/repos/{self.config.organization}/{repository}/pulls"
        params = {"state": state, "per_page": limit}
        if state != "open":
            params.update({"sort": "updated", "direction": "desc"})

        logger.debug(f"Listing {state} pull requests of {repository}")
        response = self._get(endpoint, params=params)

        if not isinstance(response, list):
            error_msg = f"Unexpected response type: {type(response).__name__}"
            logger.error(error_msg)
            raise TransportError(error_msg)

        return [GitHubPullRequest.from_api_response(pr) for pr in response[:limit]]
