"""
Common response models and utilities.

Shared model configuration (camelCase wire names), UTC timestamp
normalization and the generic page wrapper.

Dependencies: pydantic
System role: Common API response structures
"""

import math
from datetime import datetime, timezone
from typing import Annotated, Generic, Sequence, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops tzinfo) and convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(ensure_utc)]


def not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class CamelModel(BaseModel):
    """Request schema base: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DomainModel(BaseModel):
    """Immutable domain object, loadable from ORM rows."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class Page(DomainModel, Generic[T]):
    """One zero-indexed page of an ordered result."""

    content: list[T]
    number_of_elements: int = Field(description="Element count on this page")
    page: int = Field(description="Zero-indexed page number")
    size: int = Field(description="Requested page size")
    total_elements: int
    total_pages: int
    last: bool

    @classmethod
    def of(cls, content: Sequence[T], page: int, size: int, total_elements: int) -> "Page[T]":
        """
        Build a page and derive its metadata.

        Args:
            content: Items on this page
            page: Zero-indexed page number
            size: Requested page size (>= 1)
            total_elements: Total element count across all pages

        Returns:
            Page with total_pages = ceil(total/size) and
            last = page >= total_pages - 1
        """
        total_pages = math.ceil(total_elements / size) if size > 0 else 0
        return cls(
            content=list(content),
            number_of_elements=len(content),
            page=page,
            size=size,
            total_elements=total_elements,
            total_pages=total_pages,
            last=page >= total_pages - 1,
        )
