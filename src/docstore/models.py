"""Value types for stored documents and search requests"""

from __future__ import annotations

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: datetime | None) -> datetime | None:
    """Treat naive timestamps as UTC so every stored or compared timestamp is aware."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored record. Mutable so that id assignment on save is visible to the caller."""
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None     # caller-supplied; never defaulted

    @field_validator("created")
    @classmethod
    def _created_as_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Filter dimensions for search. None or an empty list means no constraint."""
    model_config = ConfigDict(frozen=True)

    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str | None] | None = None
    created_from: datetime | None = None    # inclusive
    created_to: datetime | None = None      # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_as_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)
