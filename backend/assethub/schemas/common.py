"""Shared schema building blocks."""

import re
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.:\-]*$")

T = TypeVar("T")


def validate_token(value: Optional[str]) -> Optional[str]:
    """Tokens appear in URLs, so keep them to a safe character set."""
    if value is not None and not TOKEN_PATTERN.match(value):
        raise ValueError(
            "Token must start with alphanumeric and contain only letters, numbers, "
            "underscores, hyphens, dots, or colons"
        )
    return value


def reject_null(value):
    """Used on update schemas for columns that cannot be cleared."""
    if value is None:
        raise ValueError("Field may be omitted but not set to null")
    return value


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BrandingFields(CamelModel):
    """Presentation attributes shared by branded entities."""

    image_url: Optional[str] = Field(None, max_length=1024)
    icon: Optional[str] = Field(None, max_length=100)
    background_color: Optional[str] = Field(None, max_length=32)
    foreground_color: Optional[str] = Field(None, max_length=32)
    border_color: Optional[str] = Field(None, max_length=32)


class SearchResultsResponse(CamelModel, Generic[T]):
    """List envelope: ``{"results": [...], "numResults": <total>}``."""

    results: list[T]
    num_results: int
