class ReleaseReadinessError(Exception):
    """Base exception for release-readiness errors."""

    pass


class ConfigurationError(ReleaseReadinessError, ValueError):
    """Raised when required settings are missing or invalid at startup."""

    pass


class TransportError(ReleaseReadinessError):
    """Raised when a fetch from the source control host or Jira fails."""

    pass


class AuthenticationError(TransportError):
    """Raised when an API rejects the configured credentials (401/403)."""

    pass


class TicketLookupError(TransportError, LookupError):
    """Raised when a single Jira ticket cannot be fetched."""

    def __init__(self, ticket_id: str, message: str) -> None:
        super().__init__(f"Error getting issue {ticket_id}: {message}")
        self.ticket_id = ticket_id
