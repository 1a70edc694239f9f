"""
Jira sprint models.
"""

import logging
from enum import Enum
from typing import Any

from pydantic import ConfigDict

from ..base import ApiModel
from ..constants import DEFAULT_SPRINT_ID, EMPTY_STRING

logger = logging.getLogger("release-readiness.models")


class SprintState(str, Enum):
    """Lifecycle state of a sprint."""

    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"
    FUTURE = "FUTURE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_token(cls, token: Any) -> "SprintState":
        """
        Map a raw state token to a SprintState.

        Jira Server sends upper case tokens inside sprint descriptors while the
        agile REST API sends lower case ones; both are accepted.

        Args:
            token: The raw state value

        Returns:
            The matching state, or UNKNOWN for anything unrecognized
        """
        if not isinstance(token, str):
            return cls.UNKNOWN
        try:
            return cls(token.strip().upper())
        except ValueError:
            return cls.UNKNOWN


class JiraSprint(ApiModel):
    """
    Model representing one sprint membership of a Jira issue.
    """

    model_config = ConfigDict(frozen=True)

    id: int = DEFAULT_SPRINT_ID
    name: str = EMPTY_STRING
    state: SprintState = SprintState.UNKNOWN

    @property
    def is_active(self) -> bool:
        return self.state is SprintState.ACTIVE

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraSprint":
        """
        Create a JiraSprint from the structured sprint field of a Jira issue.

        Newer Jira Cloud instances return ``{"id": 42, "name": "...",
        "state": "active", "boardId": 3}`` instead of a descriptor string.
        Missing or malformed values fall back to the defaults.

        Args:
            data: One element of the sprint custom field

        Returns:
            A JiraSprint instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        sprint_id = data.get("id", DEFAULT_SPRINT_ID)
        try:
            sprint_id = int(sprint_id)
        except (TypeError, ValueError):
            logger.debug(f"Sprint id {sprint_id!r} is not an integer, using default")
            sprint_id = DEFAULT_SPRINT_ID

        name = data.get("name")
        if not isinstance(name, str):
            name = EMPTY_STRING

        return cls(
            id=sprint_id,
            name=name,
            state=SprintState.from_token(data.get("state")),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for report output."""
        return {
            "id": self.id,
            "name": self.name,
            "state": self.state.value,
        }
