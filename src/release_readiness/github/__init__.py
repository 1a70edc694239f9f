"""GitHub API module for release-readiness.

This module provides the GitHub pull request source.
"""

from .client import GitHubClient
from .config import GitHubConfig
from .pull_requests import PullRequestsMixin


class GitHubFetcher(PullRequestsMixin):
    """
    The main GitHub client class.

    This class inherits from mixins that provide specific functionality:
    - PullRequestsMixin: Pull request listing
    """

    pass


__all__ = [
    "GitHubFetcher",
    "GitHubConfig",
    "GitHubClient",
]
