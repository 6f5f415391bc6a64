"""
Custom field value models.

Jira returns custom field values in several shapes: plain scalars (text,
numbers, dates), lists (labels, multi-user pickers) and option objects
(single-select lists), which are read as ``{"self": ..., "value": ..., "id": ...}``
but written back as ``{"value": ...}``.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class ScalarFieldValue(BaseModel):
    """A plain custom field value, copied as is."""

    kind: Literal["scalar"] = "scalar"
    value: Any = None

    def to_write_value(self) -> Any:
        return self.value


class ListFieldValue(BaseModel):
    """A multi-valued custom field, copied as is."""

    kind: Literal["list"] = "list"
    items: list[Any] = Field(default_factory=list)

    def to_write_value(self) -> list[Any]:
        return list(self.items)


class OptionFieldValue(BaseModel):
    """An option object; only its ``value`` survives a copy."""

    kind: Literal["option"] = "option"
    value: Any = None
    raw: dict[str, Any] = Field(default_factory=dict)

    def to_write_value(self) -> dict[str, Any]:
        return {"value": self.value}


CustomFieldValue = Annotated[
    ScalarFieldValue | ListFieldValue | OptionFieldValue,
    Field(discriminator="kind"),
]


def parse_field_value(raw: Any) -> ScalarFieldValue | ListFieldValue | OptionFieldValue:
    """
    Classify a raw custom field value read from the Jira API.

    Args:
        raw: The value of a custom field as returned by Jira

    Returns:
        The matching custom field value model
    """
    if isinstance(raw, dict):
        return OptionFieldValue(value=raw.get("value"), raw=raw)
    if isinstance(raw, list | tuple):
        return ListFieldValue(items=list(raw))
    return ScalarFieldValue(value=raw)
