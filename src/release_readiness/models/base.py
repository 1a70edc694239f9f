"""
Base models and mixins shared by every API model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    Base model for data parsed from API responses.

    Subclasses implement ``from_api_response`` to build themselves from the raw
    JSON payload, degrading to defaults instead of raising on missing fields.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ApiModel":
        """
        Create a model instance from an API response.

        Args:
            data: The raw API response data
            **kwargs: Additional context needed for conversion

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary.

        Returns:
            A dictionary with the model's fields, None values dropped
        """
        return self.model_dump(exclude_none=True, mode="json")
