"""SQLModel adapter for the document store."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.workspace_authority.store.base import ConstraintViolationError, DocumentStore, Filter


def _clause(model: type[SQLModel], f: Filter) -> Any:
    column = getattr(model, f.field)
    if f.op == "eq":
        return column == f.value
    if f.op == "is_null":
        return column.is_(None)
    if f.op == "gt":
        return column > f.value
    if f.op == "lt":
        return column < f.value
    raise ValueError(f"Unsupported filter op: {f.op}")


class SQLStore(DocumentStore):
    """Document store backed by an async SQLAlchemy session.

    Every write commits immediately. The session is owned by the caller.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_documents[M: SQLModel](
        self,
        model: type[M],
        filters: Sequence[Filter] = (),
        *,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[M]:
        query = select(model).where(*[_clause(model, f) for f in filters])
        if order_by is not None:
            column = getattr(model, order_by)
            query = query.order_by(column.desc() if descending else column)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_document[M: SQLModel](self, model: type[M], id: str) -> M | None:
        return await self.session.get(model, id)

    async def create_document[M: SQLModel](self, entity: M) -> M:
        self.session.add(entity)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(str(e.orig)) from e
        await self.session.refresh(entity)
        return entity

    async def update_document[M: SQLModel](
        self, model: type[M], id: str, values: dict[str, Any]
    ) -> M | None:
        entity = await self.session.get(model, id)
        if entity is None:
            return None
        for key, value in values.items():
            setattr(entity, key, value)
        self.session.add(entity)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(str(e.orig)) from e
        await self.session.refresh(entity)
        return entity

    async def delete_document(self, model: type[SQLModel], id: str) -> bool:
        result = await self.session.execute(
            delete(model).where(model.id == id)  # type: ignore[attr-defined]
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0  # type: ignore[attr-defined]
