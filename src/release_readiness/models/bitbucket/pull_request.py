"""
Bitbucket pull request models.

This module provides the pull request model for both Bitbucket Cloud and
Bitbucket Server/Data Center payloads.
"""

import logging
from typing import Any

from ..change_request import ChangeRequest
from ..constants import EMPTY_STRING, UNKNOWN

logger = logging.getLogger("release-readiness.models")

BRANCH_REF_PREFIX = "refs/heads/"


class BitbucketPullRequest(ChangeRequest):
    """
    Model representing a Bitbucket pull request.
    """

    source_branch: str = EMPTY_STRING
    destination_branch: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], is_cloud: bool = True, **kwargs: Any
    ) -> "BitbucketPullRequest":
        """
        Create a BitbucketPullRequest from a Bitbucket API response.

        Args:
            data: The pull request data from the Bitbucket API
            is_cloud: Whether the data is from Bitbucket Cloud or Server

        Returns:
            A BitbucketPullRequest instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        if is_cloud:
            source_branch = EMPTY_STRING
            if source := data.get("source"):
                if isinstance(source, dict) and (branch := source.get("branch")):
                    if isinstance(branch, dict):
                        source_branch = branch.get("name", EMPTY_STRING)

            destination_branch = EMPTY_STRING
            if destination := data.get("destination"):
                if isinstance(destination, dict):
                    branch = destination.get("branch")
                    if branch and isinstance(branch, dict):
                        destination_branch = branch.get("name", EMPTY_STRING)

            author = None
            if author_data := data.get("author"):
                if isinstance(author_data, dict):
                    author = author_data.get("display_name")

            url = None
            links = data.get("links")
            if isinstance(links, dict) and isinstance(links.get("html"), dict):
                url = links["html"].get("href")

        else:
            source_branch = EMPTY_STRING
            if from_ref := data.get("fromRef"):
                if isinstance(from_ref, dict):
                    ref_id = from_ref.get("id", "")
                    if ref_id.startswith(BRANCH_REF_PREFIX):
                        source_branch = ref_id[len(BRANCH_REF_PREFIX) :]

            destination_branch = EMPTY_STRING
            if to_ref := data.get("toRef"):
                if isinstance(to_ref, dict):
                    ref_id = to_ref.get("id", "")
                    if ref_id.startswith(BRANCH_REF_PREFIX):
                        destination_branch = ref_id[len(BRANCH_REF_PREFIX) :]

            author = None
            if author_data := data.get("author"):
                if isinstance(author_data, dict) and (user := author_data.get("user")):
                    if isinstance(user, dict):
                        author = user.get("displayName")

            # Server lists links as {"self": [{"href": ...}]}
            url = None
            links = data.get("links")
            if isinstance(links, dict):
                self_links = links.get("self")
                if isinstance(self_links, list) and self_links:
                    if isinstance(self_links[0], dict):
                        url = self_links[0].get("href")

        return cls(
            number=data.get("id") or 0,
            title=data.get("title") or UNKNOWN,
            state=data.get("state") or EMPTY_STRING,
            url=url,
            author=author,
            source_branch=source_branch,
            destination_branch=destination_branch,
        )
