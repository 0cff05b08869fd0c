"""Shared base classes for the generated API models.

Every request and response body of the Discourse API is a subclass of
DiscourseModel. Closed enumerations subclass DiscourseEnum so that
formatting a member yields its wire tag.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class DiscourseModel(BaseModel):
    """A data-transfer object mirroring one JSON schema of the API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_json(cls, text: str | bytes):
        """Build an instance from a JSON response body."""
        return cls.model_validate_json(text)

    def to_dict(self) -> dict[str, Any]:
        """Wire representation: aliased keys, absent optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    def __str__(self) -> str:
        return self.to_json(indent=2)

    @classmethod
    def table_headers(cls) -> list[str]:
        """Column headers for tabular output, in field declaration order."""
        return list(cls.model_fields)

    def table_row(self) -> list[str]:
        """One row of cells matching table_headers()."""
        row = []
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                row.append("")
            elif info.is_required() and isinstance(value, str) and not isinstance(value, Enum):
                row.append(value)
            else:
                row.append(repr(value))
        return row


class DiscourseEnum(str, Enum):
    """A closed enumeration serialized as its declared tag."""

    def __str__(self) -> str:
        return self.value


class QueryParams(DiscourseModel):
    """Optional query-string parameters of a list endpoint."""

    def to_query(self) -> list[tuple[str, str]]:
        """Present parameters as (name, value) pairs, in declaration order."""
        query = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            query.append((name, query_value(value)))
        return query


def query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
