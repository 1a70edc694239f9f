"""Readiness classification of a pull request from its tickets."""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from ..models.jira import JiraTicket


class SprintSymbol(str, Enum):
    """Sprint readiness of a pull request."""

    HAS_ACTIVE_SPRINT = "HAS_ACTIVE_SPRINT"
    HAS_CLOSED_SPRINT_ONLY = "HAS_CLOSED_SPRINT_ONLY"
    NO_SPRINT = "NO_SPRINT"


class ReleaseSymbol(str, Enum):
    """Release readiness of a pull request."""

    HAS_RELEASE = "HAS_RELEASE"
    NO_RELEASE = "NO_RELEASE"


class ReadinessReport(BaseModel):
    """Classification result for one pull request."""

    model_config = ConfigDict(frozen=True)

    sprint_symbol: SprintSymbol = SprintSymbol.HAS_ACTIVE_SPRINT
    release_symbol: ReleaseSymbol = ReleaseSymbol.HAS_RELEASE
    no_tickets_found: bool = False

    @property
    def is_ready(self) -> bool:
        return (
            not self.no_tickets_found
            and self.sprint_symbol is SprintSymbol.HAS_ACTIVE_SPRINT
            and self.release_symbol is ReleaseSymbol.HAS_RELEASE
        )


def classify(tickets: Iterable[JiraTicket]) -> ReadinessReport:
    """
    Classify a pull request from the tickets its title references.

    Starts from the best symbols and downgrades them ticket by ticket. A
    ticket without an active sprint downgrades to HAS_CLOSED_SPRINT_ONLY when
    it was ever in a sprint, or to NO_SPRINT when it never was; NO_SPRINT is
    never lifted again. A ticket without a fix version downgrades the release
    symbol to NO_RELEASE.

    Whether a later closed-only ticket should lift NO_SPRINT back to
    HAS_CLOSED_SPRINT_ONLY is an open choice; the stricter symbol is kept.

    Args:
        tickets: The pull request's tickets, in title order

    Returns:
        The ReadinessReport; ``no_tickets_found`` is set for an empty list and
        the symbols are then meaningless
    """
    tickets = list(tickets)
    if not tickets:
        return ReadinessReport(no_tickets_found=True)

    sprint_symbol = SprintSymbol.HAS_ACTIVE_SPRINT
    release_symbol = ReleaseSymbol.HAS_RELEASE

    for ticket in tickets:
        if not ticket.has_sprint():
            if not ticket.has_any_sprint():
                sprint_symbol = SprintSymbol.NO_SPRINT
            elif sprint_symbol is not SprintSymbol.NO_SPRINT:
                sprint_symbol = SprintSymbol.HAS_CLOSED_SPRINT_ONLY
        if not ticket.has_release_version():
            release_symbol = ReleaseSymbol.NO_RELEASE

    return ReadinessReport(sprint_symbol=sprint_symbol, release_symbol=release_symbol)
