"""GitHub data models."""

from .pull_request import GitHubPullRequest

__all__ = [
    "GitHubPullRequest",
]
