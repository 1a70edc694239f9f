"""
Correlation of pull requests with Jira tickets.

Ticket identifiers are extracted from pull request titles, the tickets are
looked up and assembled, and each pull request is classified by the sprint and
release state of its tickets.
"""

from .aggregator import build_ticket, collect_tickets
from .audit import AuditEntry, AuditSummary, ReleaseAudit
from .classifier import ReadinessReport, ReleaseSymbol, SprintSymbol, classify
from .extractor import TICKET_ID_PATTERN, extract_ticket_ids
from .protocols import ChangeRequestSource, TicketSource
from .sprints import parse_sprint_descriptor, parse_sprint_value, select_current_sprint

__all__ = [
    "AuditEntry",
    "AuditSummary",
    "ChangeRequestSource",
    "ReadinessReport",
    "ReleaseAudit",
    "ReleaseSymbol",
    "SprintSymbol",
    "TICKET_ID_PATTERN",
    "TicketSource",
    "build_ticket",
    "classify",
    "collect_tickets",
    "extract_ticket_ids",
    "parse_sprint_descriptor",
    "parse_sprint_value",
    "select_current_sprint",
]
