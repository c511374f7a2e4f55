"""Document store contract and adapters."""

from src.workspace_authority.store.base import (
    ConstraintViolationError,
    DocumentStore,
    Filter,
    eq,
    gt,
    is_null,
    lt,
)
from src.workspace_authority.store.memory import InMemoryStore
from src.workspace_authority.store.sql import SQLStore

__all__ = [
    "ConstraintViolationError",
    "DocumentStore",
    "Filter",
    "InMemoryStore",
    "SQLStore",
    "eq",
    "gt",
    "is_null",
    "lt",
]
