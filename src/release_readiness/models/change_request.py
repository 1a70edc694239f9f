"""
Provider independent pull request model.
"""

from typing import Any

from .base import ApiModel
from .constants import EMPTY_STRING, UNKNOWN


class ChangeRequest(ApiModel):
    """
    Model representing a pull request as the audit consumes it.

    Provider models subclass it and fill the fields from their own payloads.
    """

    number: int = 0
    title: str = UNKNOWN
    state: str = EMPTY_STRING
    url: str | None = None
    author: str | None = None

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for report output."""
        result: dict[str, Any] = {
            "number": self.number,
            "title": self.title,
            "state": self.state,
        }

        if self.url:
            result["url"] = self.url

        if self.author:
            result["author"] = self.author

        return result
