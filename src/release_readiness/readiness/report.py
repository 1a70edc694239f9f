"""Text rendering of readiness results."""

from collections.abc import Sequence

import click

from ..models.change_request import ChangeRequest
from ..models.jira import JiraTicket
from .classifier import ReadinessReport, ReleaseSymbol, SprintSymbol

CHECK = "✔"
CROSS = "✘"
PARTIAL = "~"
QUESTION = "?"

SPRINT_MARKERS = {
    SprintSymbol.HAS_ACTIVE_SPRINT: (CHECK, "green"),
    SprintSymbol.HAS_CLOSED_SPRINT_ONLY: (PARTIAL, "yellow"),
    SprintSymbol.NO_SPRINT: (CROSS, "red"),
}

RELEASE_MARKERS = {
    ReleaseSymbol.HAS_RELEASE: (CHECK, "green"),
    ReleaseSymbol.NO_RELEASE: (CROSS, "red"),
}


def sprint_marker(symbol: SprintSymbol) -> str:
    text, color = SPRINT_MARKERS[symbol]
    return click.style(text, fg=color)


def release_marker(symbol: ReleaseSymbol) -> str:
    text, color = RELEASE_MARKERS[symbol]
    return click.style(text, fg=color)


def no_tickets_marker() -> str:
    return click.style(QUESTION, fg="yellow")


def render_repository_header(repository: str, state: str) -> str:
    """Header line printed before the pull requests of one repository."""
    return click.style(f"{repository} ({state})", bold=True)


def render_ticket(ticket: JiraTicket) -> str:
    """
    Detail line for one ticket.

    Release versions and the current sprint are green when present and red
    otherwise; a ticket without an active sprint shows ``NONE``.
    """
    versions_color = "green" if ticket.has_release_version() else "red"
    sprint_color = "green" if ticket.has_sprint() else "red"
    versions = ", ".join(ticket.release_versions) or "-"
    return (
        f"\t{ticket.number}: {ticket.summary}\n"
        f"\t\tRelease Version: {click.style(versions, fg=versions_color)}\n"
        f"\t\tCurrent Sprint: "
        f"{click.style(ticket.current_sprint_name, fg=sprint_color)}"
    )


def render_change_request(
    change_request: ChangeRequest,
    tickets: Sequence[JiraTicket],
    report: ReadinessReport,
    details: bool = False,
) -> str:
    """
    Report line for one pull request.

    Args:
        change_request: The pull request
        tickets: Its tickets, in title order
        report: The classification of those tickets
        details: Append one block per ticket

    Returns:
        The styled text, possibly spanning several lines
    """
    if report.no_tickets_found:
        markers = no_tickets_marker()
    else:
        markers = sprint_marker(report.sprint_symbol) + release_marker(
            report.release_symbol
        )

    lines = [f"{markers} #{change_request.number} {change_request.title}"]
    if details:
        lines.extend(render_ticket(ticket) for ticket in tickets)
    return "\n".join(lines)
