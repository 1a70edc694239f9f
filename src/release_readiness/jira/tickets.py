"""Module for Jira ticket lookups."""

import requests
from atlassian.errors import ApiError

from ..exceptions import AuthenticationError, TicketLookupError
from ..logging_config import get_logger
from ..models.jira import TicketPayload
from .client import JiraClient

logger = get_logger("jira")

TICKET_FIELDS = ("summary", "fixVersions")


class TicketsMixin(JiraClient):
    """Mixin for fetching the ticket data the audit needs."""

    def get_ticket_payload(self, ticket_id: str) -> TicketPayload:
        """
        Fetch summary, fix versions and sprint values of a ticket.

        Args:
            ticket_id: Ticket key, e.g. "FOO-100"

        Returns:
            The raw TicketPayload

        Raises:
            AuthenticationError: If Jira rejects the credentials
            TicketLookupError: If the ticket cannot be fetched
        """
        fields = ",".join((*TICKET_FIELDS, self.config.sprint_field))
        try:
            issue = self.jira.issue(ticket_id, fields=fields)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status in (401, 403):
                error_msg = f"Jira rejected the credentials ({status}) for {ticket_id}"
                logger.error(error_msg)
                raise AuthenticationError(error_msg) from e
            logger.error(f"Error getting issue {ticket_id}: {str(e)}")
            raise TicketLookupError(ticket_id, str(e)) from e
        except (requests.RequestException, ApiError) as e:
            logger.error(f"Error getting issue {ticket_id}: {str(e)}")
            raise TicketLookupError(ticket_id, str(e)) from e

        if not isinstance(issue, dict):
            error_msg = f"unexpected response type {type(issue).__name__}"
            logger.error(f"Error getting issue {ticket_id}: {error_msg}")
            raise TicketLookupError(ticket_id, error_msg)

        return TicketPayload.from_api_response(
            issue, sprint_field=self.config.sprint_field
        )
