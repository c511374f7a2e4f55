"""Store dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from src.workspace_authority.core.db import get_session
from src.workspace_authority.store import DocumentStore, SQLStore


async def get_store() -> AsyncGenerator[DocumentStore]:
    """Request-scoped store over a fresh database session."""
    async with get_session() as session:
        yield SQLStore(session)


Store = Annotated[DocumentStore, Depends(get_store)]
