"""Lookup of custom field identifiers by display name."""

import logging
from collections.abc import Iterable
from typing import Protocol

from ..jira.constants import CUSTOM_FIELD_PREFIX

logger = logging.getLogger("jira-cli.backport")


class FieldSource(Protocol):
    def get_fields(self) -> list[dict]: ...


class CustomFieldCatalog:
    """Maps custom field display names to ``customfield_*`` identifiers.

    The field schema is fetched on first use and never refreshed. Fields
    outside the custom field namespace are ignored; when two custom fields
    share a display name the last one wins.
    """

    def __init__(self, source: FieldSource) -> None:
        self._source = source
        self._field_ids: dict[str, str] | None = None

    @property
    def field_ids(self) -> dict[str, str]:
        """The display name to identifier map, built on first access."""
        if self._field_ids is None:
            self._field_ids = self._build()
        return self._field_ids

    def _build(self) -> dict[str, str]:
        field_ids = {}
        for field in self._source.get_fields():
            field_id = str(field.get("id", ""))
            if field_id.startswith(CUSTOM_FIELD_PREFIX):
                field_ids[field.get("name", "")] = field_id

        logger.debug(f"Custom field catalog built with {len(field_ids)} fields")
        return field_ids

    def resolve(self, display_name: str) -> str | None:
        """Return the identifier of a custom field, or None if it is unknown."""
        return self.field_ids.get(display_name)

    def resolve_many(self, display_names: Iterable[str]) -> dict[str, str]:
        """Return ``{display_name: identifier}`` for the names that resolve.

        Unknown names are left out. Input order is preserved.
        """
        resolved = {}
        for display_name in display_names:
            field_id = self.resolve(display_name)
            if field_id is None:
                logger.debug(f"Custom field '{display_name}' not found, skipping")
                continue
            resolved[display_name] = field_id
        return resolved
