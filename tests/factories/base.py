"""Base factory configuration for polyfactory."""

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from src.workspace_authority.models import new_id, utc_now

__all__ = ["BaseFactory", "new_id", "utc_now"]


class BaseFactory(SQLAlchemyFactory):
    """Base factory with common configuration for all models.

    Foreign keys and relationships are never generated; tests pass the ids
    that tie records together.
    """

    __is_base_factory__ = True
    __set_relationships__ = False
    __set_foreign_keys__ = False
