"""
Base model for Jira API data.

Every model is built from a raw Jira REST payload through
``from_api_response`` and can be turned back into a plain dictionary
through ``to_simplified_dict``.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base class for models created from Jira API responses."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from an API response.

        Args:
            data: The raw API response data
            **kwargs: Additional context for model construction

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to a simplified dictionary."""
        return self.model_dump(exclude_none=True)
