"""
Jira ticket models.

``TicketPayload`` is the raw view of an issue as fetched from Jira;
``JiraTicket`` is the decision-ready entity built from it.
"""

import logging
from typing import Any

from pydantic import ConfigDict, Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, NONE_VALUE
from .sprint import JiraSprint

logger = logging.getLogger("release-readiness.models")

DEFAULT_SPRINT_FIELD = "customfield_10006"


class TicketPayload(ApiModel):
    """
    Raw ticket data: summary, release versions and unparsed sprint values.
    """

    key: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    fix_versions: list[str] = Field(default_factory=list)
    sprint_values: list[Any] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls,
        data: dict[str, Any],
        sprint_field: str = DEFAULT_SPRINT_FIELD,
        **kwargs: Any,
    ) -> "TicketPayload":
        """
        Create a TicketPayload from a Jira issue response.

        Args:
            data: The issue data from the Jira API
            sprint_field: Custom field id holding the sprint memberships

        Returns:
            A TicketPayload instance; missing fields degrade to empty values
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls()

        fields = data.get("fields", {})
        if not isinstance(fields, dict):
            fields = {}

        summary = fields.get("summary")
        if summary is None:
            summary = EMPTY_STRING

        fix_versions = []
        if fix_versions_data := fields.get("fixVersions"):
            if isinstance(fix_versions_data, list):
                for version in fix_versions_data:
                    name = version.get("name") if isinstance(version, dict) else version
                    if isinstance(name, str) and name:
                        fix_versions.append(name)
                    else:
                        logger.debug(f"Ignoring fix version without a name: {version!r}")

        sprint_values = fields.get(sprint_field)
        if sprint_values is None:
            sprint_values = []
        elif not isinstance(sprint_values, list):
            # Single-valued sprint fields on some Server instances
            sprint_values = [sprint_values]

        return cls(
            key=str(data.get("key", EMPTY_STRING)),
            summary=str(summary),
            fix_versions=fix_versions,
            sprint_values=sprint_values,
        )


class JiraTicket(ApiModel):
    """
    Model representing a Jira ticket referenced by a pull request.

    ``sprints`` keeps every sprint membership in the order Jira reports them;
    ``current_sprint`` is the active one, if any.
    """

    model_config = ConfigDict(frozen=True)

    number: str
    summary: str = EMPTY_STRING
    release_versions: tuple[str, ...] = ()
    sprints: tuple[JiraSprint, ...] = ()
    current_sprint: JiraSprint | None = None

    def has_sprint(self) -> bool:
        """Whether the ticket is in an active sprint."""
        return self.current_sprint is not None

    def has_any_sprint(self) -> bool:
        """Whether the ticket was ever assigned to a sprint."""
        return len(self.sprints) > 0

    def has_release_version(self) -> bool:
        """Whether the ticket has at least one fix version."""
        return len(self.release_versions) > 0

    @property
    def current_sprint_name(self) -> str:
        if self.current_sprint is None:
            return NONE_VALUE
        return self.current_sprint.name

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for report output."""
        result: dict[str, Any] = {
            "number": self.number,
            "summary": self.summary,
            "release_versions": list(self.release_versions),
            "sprints": [sprint.to_simplified_dict() for sprint in self.sprints],
        }

        if self.current_sprint:
            result["current_sprint"] = self.current_sprint.to_simplified_dict()

        return result
