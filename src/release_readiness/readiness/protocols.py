"""Interfaces the audit needs from the source control host and Jira."""

from typing import Protocol, runtime_checkable

from ..models.change_request import ChangeRequest
from ..models.jira import TicketPayload


@runtime_checkable
class ChangeRequestSource(Protocol):
    """Lists the pull requests of a repository."""

    def list_open(self, repository: str) -> list[ChangeRequest]:
        """
        List the open pull requests of a repository.

        Raises:
            TransportError: If the host cannot be reached or rejects the request
        """
        ...

    def list_closed(self, repository: str, limit: int) -> list[ChangeRequest]:
        """
        List at most ``limit`` recently closed pull requests of a repository.

        Raises:
            TransportError: If the host cannot be reached or rejects the request
        """
        ...


@runtime_checkable
class TicketSource(Protocol):
    """Fetches raw ticket data by identifier."""

    def get_ticket_payload(self, ticket_id: str) -> TicketPayload:
        """
        Fetch summary, fix versions and sprint values of a ticket.

        Raises:
            TicketLookupError: If the ticket cannot be fetched
        """
        ...
