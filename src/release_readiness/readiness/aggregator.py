"""Assembly of JiraTicket entities from raw ticket payloads."""

from collections.abc import Iterable

from ..logging_config import get_logger
from ..models.jira import JiraTicket, TicketPayload
from .protocols import TicketSource
from .sprints import parse_sprint_value, select_current_sprint

logger = get_logger("tickets")


def build_ticket(ticket_id: str, payload: TicketPayload) -> JiraTicket:
    """
    Build the decision-ready ticket from its raw payload.

    Args:
        ticket_id: The identifier the ticket was looked up with
        payload: Summary, fix versions and raw sprint values from Jira

    Returns:
        The JiraTicket with every sprint parsed and the active one selected
    """
    sprints = tuple(parse_sprint_value(value) for value in payload.sprint_values)
    return JiraTicket(
        number=ticket_id,
        summary=payload.summary,
        release_versions=tuple(payload.fix_versions),
        sprints=sprints,
        current_sprint=select_current_sprint(sprints),
    )


def collect_tickets(ticket_ids: Iterable[str], source: TicketSource) -> list[JiraTicket]:
    """
    Look up and build every ticket referenced by one pull request.

    Lookups run one at a time; the first failure aborts the rest.

    Args:
        ticket_ids: Identifiers in title order
        source: Where the raw payloads come from

    Returns:
        One JiraTicket per identifier, in the same order

    Raises:
        TicketLookupError: If any lookup fails
    """
    tickets = []
    for ticket_id in ticket_ids:
        payload = source.get_ticket_payload(ticket_id)
        ticket = build_ticket(ticket_id, payload)
        logger.debug(
            f"Ticket {ticket_id}: {len(ticket.sprints)} sprint(s), "
            f"current={ticket.current_sprint_name}, "
            f"versions={list(ticket.release_versions)}"
        )
        tickets.append(ticket)
    return tickets
