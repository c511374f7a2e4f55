"""Base repository with common CRUD operations."""

from sqlmodel import SQLModel

from src.workspace_authority.store.base import DocumentStore


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing typed access to one collection of the store.

    Repositories shape queries only. Ordering of writes across collections
    is decided in the service layer.
    """

    model: type[ModelType]

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_by_id(self, id: str) -> ModelType | None:
        """Get a record by its primary key."""
        return await self.store.get_document(self.model, id)

    async def add(self, entity: ModelType) -> ModelType:
        """Persist a new record."""
        return await self.store.create_document(entity)

    async def delete_by_id(self, id: str) -> bool:
        """Delete a record by its primary key."""
        return await self.store.delete_document(self.model, id)
