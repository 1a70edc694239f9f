"""
Jira data models for release-readiness.
"""

from .sprint import JiraSprint, SprintState
from .ticket import DEFAULT_SPRINT_FIELD, JiraTicket, TicketPayload

__all__ = [
    "DEFAULT_SPRINT_FIELD",
    "JiraSprint",
    "JiraTicket",
    "SprintState",
    "TicketPayload",
]
