"""Narrow document-store contract the authority depends on.

Adapters implement filtered listing, get/create/update/delete by id, and
cursor pagination. Each write is durable on return; there are no
multi-operation transactions, so callers order their writes.
"""

import base64
import binascii
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlmodel import SQLModel


class ConstraintViolationError(Exception):
    """A write was rejected by a uniqueness or key constraint."""


@dataclass(frozen=True)
class Filter:
    """Single field predicate. Supported ops: eq, is_null, gt, lt."""

    field: str
    op: str
    value: Any = None


def eq(field: str, value: Any) -> Filter:
    return Filter(field, "eq", value)


def is_null(field: str) -> Filter:
    return Filter(field, "is_null")


def gt(field: str, value: Any) -> Filter:
    return Filter(field, "gt", value)


def lt(field: str, value: Any) -> Filter:
    return Filter(field, "lt", value)


def cursor_for(value: Any) -> str:
    """Encode a field value as an opaque cursor."""
    raw = value.isoformat() if isinstance(value, datetime) else str(value)
    return base64.urlsafe_b64encode(raw.encode()).decode()


def parse_cursor(cursor: str) -> datetime | str:
    """Decode a cursor to a datetime if it holds one, else a string.

    Raises:
        ValueError: If the cursor is not valid base64 text.
    """
    try:
        raw = base64.urlsafe_b64decode(cursor.encode()).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError("Invalid cursor") from e
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return raw


class DocumentStore(ABC):
    """Async document/row store keyed by SQLModel table classes."""

    @abstractmethod
    async def list_documents[M: SQLModel](
        self,
        model: type[M],
        filters: Sequence[Filter] = (),
        *,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[M]:
        """Return records matching every filter."""

    @abstractmethod
    async def get_document[M: SQLModel](self, model: type[M], id: str) -> M | None:
        """Return a record by primary key, or None."""

    @abstractmethod
    async def create_document[M: SQLModel](self, entity: M) -> M:
        """Persist a new record.

        Raises:
            ConstraintViolationError: If a unique or key constraint rejects it
        """

    @abstractmethod
    async def update_document[M: SQLModel](
        self, model: type[M], id: str, values: dict[str, Any]
    ) -> M | None:
        """Apply field updates to a record. Returns None if it does not exist."""

    @abstractmethod
    async def delete_document(self, model: type[SQLModel], id: str) -> bool:
        """Delete a record by id. Returns whether anything was deleted."""

    async def paginate[M: SQLModel](
        self,
        model: type[M],
        filters: Sequence[Filter],
        cursor: str | None,
        limit: int,
        cursor_field: str = "created_at",
    ) -> tuple[list[M], str | None, bool]:
        """Cursor pagination over a filtered listing, newest first.

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        page_filters = list(filters)
        if cursor:
            try:
                page_filters.append(lt(cursor_field, parse_cursor(cursor)))
            except ValueError:
                # Invalid cursor - ignore and start from beginning
                pass

        items = await self.list_documents(
            model,
            page_filters,
            order_by=cursor_field,
            descending=True,
            limit=limit + 1,
        )

        has_more = len(items) > limit
        if has_more:
            items = items[:limit]

        next_cursor = None
        if has_more and items:
            next_cursor = cursor_for(getattr(items[-1], cursor_field))

        return items, next_cursor, has_more
