"""
Pydantic models for release-readiness.

Models are organized by the service they are parsed from.
"""

from .base import ApiModel
from .bitbucket import BitbucketPullRequest
from .change_request import ChangeRequest
from .github import GitHubPullRequest
from .jira import JiraSprint, JiraTicket, SprintState, TicketPayload

__all__ = [
    "ApiModel",
    "BitbucketPullRequest",
    "ChangeRequest",
    "GitHubPullRequest",
    "JiraSprint",
    "JiraTicket",
    "SprintState",
    "TicketPayload",
]
