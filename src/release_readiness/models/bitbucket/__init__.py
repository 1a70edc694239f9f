"""Bitbucket data models."""

from .pull_request import BitbucketPullRequest

__all__ = [
    "BitbucketPullRequest",
]
