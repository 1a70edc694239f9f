"""Bitbucket API module for release-readiness.

This module provides the Bitbucket pull request source.
"""

from .client import BitbucketClient
from .config import BitbucketConfig
from .pull_requests import PullRequestsMixin


class BitbucketFetcher(PullRequestsMixin):
    """
    The main Bitbucket client class.

    This class inherits from mixins that provide specific functionality:
    - PullRequestsMixin: Pull request listing
    """

    pass


__all__ = [
    "BitbucketFetcher",
    "BitbucketConfig",
    "BitbucketClient",
]
