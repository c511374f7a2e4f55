"""In-process document store for tests and local tooling."""

from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from sqlmodel import SQLModel

from src.workspace_authority.store.base import ConstraintViolationError, DocumentStore, Filter


def _matches(record: dict[str, Any], f: Filter) -> bool:
    value = record.get(f.field)
    if f.op == "eq":
        return value == f.value
    if f.op == "is_null":
        return value is None
    if f.op == "gt":
        return value is not None and value > f.value
    if f.op == "lt":
        return value is not None and value < f.value
    raise ValueError(f"Unsupported filter op: {f.op}")


def _unique_keys(model: type[SQLModel]) -> list[tuple[str, ...]]:
    """Unique column groups declared on the model's table."""
    table = model.__table__  # type: ignore[attr-defined]
    return [
        tuple(column.name for column in index.columns)
        for index in table.indexes
        if index.unique
    ]


class InMemoryStore(DocumentStore):
    """Dict-backed store honouring the unique indexes declared on each model.

    Records are held as plain dicts and rebuilt on read, so callers never
    share mutable state with the store. ``seed`` bypasses constraint checks
    for tests that need to simulate a corrupted backing store.
    """

    def __init__(self) -> None:
        self._collections: dict[type[SQLModel], dict[str, dict[str, Any]]] = defaultdict(dict)

    def seed(self, *entities: SQLModel) -> None:
        """Insert records without constraint checks."""
        for entity in entities:
            data = entity.model_dump()
            self._collections[type(entity)][data["id"]] = data

    def count(self, model: type[SQLModel]) -> int:
        return len(self._collections[model])

    def _check_unique(self, model: type[SQLModel], data: dict[str, Any]) -> None:
        records = self._collections[model]
        if data["id"] in records:
            raise ConstraintViolationError(f"Duplicate id {data['id']} for {model.__name__}")
        for key in _unique_keys(model):
            candidate = tuple(data.get(field) for field in key)
            for existing in records.values():
                if tuple(existing.get(field) for field in key) == candidate:
                    raise ConstraintViolationError(
                        f"Duplicate {', '.join(key)} for {model.__name__}"
                    )

    async def list_documents[M: SQLModel](
        self,
        model: type[M],
        filters: Sequence[Filter] = (),
        *,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[M]:
        records = [
            record
            for record in self._collections[model].values()
            if all(_matches(record, f) for f in filters)
        ]
        if order_by is not None:
            records.sort(key=lambda record: record[order_by], reverse=descending)
        if limit is not None:
            records = records[:limit]
        return [model(**record) for record in records]

    async def get_document[M: SQLModel](self, model: type[M], id: str) -> M | None:
        record = self._collections[model].get(id)
        return model(**record) if record is not None else None

    async def create_document[M: SQLModel](self, entity: M) -> M:
        model = type(entity)
        data = entity.model_dump()
        self._check_unique(model, data)
        self._collections[model][data["id"]] = data
        return model(**data)

    async def update_document[M: SQLModel](
        self, model: type[M], id: str, values: dict[str, Any]
    ) -> M | None:
        record = self._collections[model].get(id)
        if record is None:
            return None
        record.update(values)
        return model(**record)

    async def delete_document(self, model: type[SQLModel], id: str) -> bool:
        return self._collections[model].pop(id, None) is not None
