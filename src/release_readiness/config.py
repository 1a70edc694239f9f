"""Configuration of an audit run."""

import os
from dataclasses import dataclass, field
from typing import Literal

from .exceptions import ConfigurationError
from .utils.env import get_env_list, is_env_truthy

DEFAULT_CLOSED_LIMIT = 10
MAX_PAGE_SIZE = 100

PROVIDERS = ("github", "bitbucket")


@dataclass
class AuditConfig:
    """What to audit and how to report it.

    Built once at startup and handed to the audit; the core never reads the
    environment itself.
    """

    repositories: list[str] = field(default_factory=list)
    provider: Literal["github", "bitbucket"] = "github"
    closed_limit: int = DEFAULT_CLOSED_LIMIT  # 0 skips closed pull requests
    details: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.repositories:
            error_msg = "At least one repository is required (AUDIT_REPOS)"
            raise ConfigurationError(error_msg)
        if self.provider not in PROVIDERS:
            error_msg = (
                f"Unknown provider {self.provider!r}, expected one of "
                f"{', '.join(PROVIDERS)}"
            )
            raise ConfigurationError(error_msg)
        if self.closed_limit < 0:
            error_msg = "closed_limit must not be negative"
            raise ConfigurationError(error_msg)
        self.closed_limit = min(self.closed_limit, MAX_PAGE_SIZE)

    @classmethod
    def from_env(cls) -> "AuditConfig":
        """Create configuration from environment variables.

        Environment variables:
            AUDIT_REPOS: Comma separated repository names (required)
            AUDIT_PROVIDER: github (default) or bitbucket
            AUDIT_CLOSED_LIMIT: Closed pull requests per repository (default: 10)
            AUDIT_DETAILS: Print one line per ticket

        Returns:
            AuditConfig instance

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        closed_limit_env = os.getenv("AUDIT_CLOSED_LIMIT", str(DEFAULT_CLOSED_LIMIT))
        try:
            closed_limit = int(closed_limit_env)
        except ValueError as e:
            error_msg = f"AUDIT_CLOSED_LIMIT must be an integer, got {closed_limit_env!r}"
            raise ConfigurationError(error_msg) from e

        return cls(
            repositories=get_env_list("AUDIT_REPOS"),
            provider=os.getenv("AUDIT_PROVIDER", "github").lower(),
            closed_limit=closed_limit,
            details=is_env_truthy("AUDIT_DETAILS"),
        )
