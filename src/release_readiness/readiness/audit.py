"""Sequential audit of the configured repositories."""

from collections.abc import Callable
from dataclasses import dataclass, field

import click

from ..config import AuditConfig
from ..exceptions import TransportError
from ..logging_config import get_logger, log_operation
from ..models.change_request import ChangeRequest
from ..models.jira import JiraTicket
from .aggregator import collect_tickets
from .classifier import ReadinessReport, classify
from .extractor import extract_ticket_ids
from .protocols import ChangeRequestSource, TicketSource
from .report import render_change_request, render_repository_header

logger = get_logger("audit")

OPEN = "open"
CLOSED = "closed"


@dataclass
class AuditEntry:
    """Result for one pull request."""

    repository: str
    state: str
    change_request: ChangeRequest
    ticket_ids: list[str]
    tickets: list[JiraTicket]
    report: ReadinessReport


@dataclass
class AuditSummary:
    """Result of a whole run."""

    entries: list[AuditEntry] = field(default_factory=list)
    failed_repositories: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed_repositories

    @property
    def ready_count(self) -> int:
        return sum(1 for entry in self.entries if entry.report.is_ready)


class ReleaseAudit:
    """Correlates the pull requests of each repository with their Jira tickets."""

    def __init__(
        self,
        config: AuditConfig,
        source: ChangeRequestSource,
        tickets: TicketSource,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self.config = config
        self.source = source
        self.tickets = tickets
        self.echo = echo

    def audit_change_request(
        self, repository: str, state: str, change_request: ChangeRequest
    ) -> AuditEntry:
        """
        Classify and print one pull request.

        Raises:
            TicketLookupError: If one of its tickets cannot be fetched
        """
        ticket_ids = extract_ticket_ids(change_request.title)
        logger.debug(f"#{change_request.number} references {ticket_ids}")

        tickets = collect_tickets(ticket_ids, self.tickets)
        report = classify(tickets)

        self.echo(
            render_change_request(
                change_request, tickets, report, details=self.config.details
            )
        )
        return AuditEntry(
            repository=repository,
            state=state,
            change_request=change_request,
            ticket_ids=ticket_ids,
            tickets=tickets,
            report=report,
        )

    def audit_repository(self, repository: str) -> list[AuditEntry]:
        """
        Audit the open and recently closed pull requests of one repository.

        Raises:
            TransportError: On the first failed fetch; the rest of the
                repository is skipped
        """
        batches = [(OPEN, self.source.list_open(repository))]
        if self.config.closed_limit > 0:
            batches.append(
                (CLOSED, self.source.list_closed(repository, self.config.closed_limit))
            )

        entries = []
        for state, change_requests in batches:
            self.echo(render_repository_header(repository, state))
            for change_request in change_requests:
                entries.append(
                    self.audit_change_request(repository, state, change_request)
                )
        return entries

    def run(self) -> AuditSummary:
        """
        Audit every configured repository in order.

        A repository whose fetches fail is logged and recorded in
        ``failed_repositories``; the run continues with the next one.
        """
        summary = AuditSummary()
        for repository in self.config.repositories:
            try:
                with log_operation(logger, "audit_repository", repository=repository):
                    summary.entries.extend(self.audit_repository(repository))
            except TransportError as e:
                self.echo(f"Couldn't audit {repository}: {e}")
                summary.failed_repositories.append(repository)
        logger.info(
            f"Audited {len(summary.entries)} pull request(s), "
            f"{summary.ready_count} ready, "
            f"{len(summary.failed_repositories)} repository failure(s)"
        )
        return summary
