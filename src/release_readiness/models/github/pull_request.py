"""
GitHub pull request models.
"""

import logging
from typing import Any

from ..change_request import ChangeRequest
from ..constants import EMPTY_STRING, UNKNOWN

logger = logging.getLogger("release-readiness.models")


class GitHubPullRequest(ChangeRequest):
    """
    Model representing a GitHub pull request.
    """

    merged_at: str | None = None
    head_branch: str = EMPTY_STRING
    base_branch: str = EMPTY_STRING

    @property
    def is_merged(self) -> bool:
        return self.merged_at is not None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "GitHubPullRequest":
        """
        Create a GitHubPullRequest from a GitHub REST API response.

        Args:
            data: One element of ``GET /repos/{owner}/{repo}/pulls``

        Returns:
            A GitHubPullRequest instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        author = None
        if user := data.get("user"):
            if isinstance(user, dict):
                author = user.get("login")

        head_branch = EMPTY_STRING
        if (head := data.get("head")) and isinstance(head, dict):
            head_branch = head.get("ref") or EMPTY_STRING

        base_branch = EMPTY_STRING
        if (base := data.get("base")) and isinstance(base, dict):
            base_branch = base.get("ref") or EMPTY_STRING

        return cls(
            number=data.get("number") or 0,
            title=data.get("title") or UNKNOWN,
            state=data.get("state") or EMPTY_STRING,
            url=data.get("html_url"),
            author=author,
            merged_at=data.get("merged_at"),
            head_branch=head_branch,
            base_branch=base_branch,
        )
