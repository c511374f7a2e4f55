"""Cursor-paginated response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results. ``next_cursor`` is opaque; pass it back unchanged."""

    items: list[T]
    next_cursor: str | None = Field(
        default=None,
        description="Cursor for the next page, or null on the last page.",
    )
    has_more: bool = False
