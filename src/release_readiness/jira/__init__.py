"""Jira API module for release-readiness.

This module provides the Jira client used to look up tickets.
"""

from .client import JiraClient
from .config import JiraConfig
from .tickets import TicketsMixin


class JiraFetcher(TicketsMixin):
    """
    The main Jira client class providing the ticket lookups of the audit.

    Further operations are added as mixins next to TicketsMixin.
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
