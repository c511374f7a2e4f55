"""Per-user preferences owned by the identity layer."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.workspace_authority.models.base import utc_now


class UserPreference(SQLModel, table=True):
    """Stores the user's preferred active workspace."""

    __tablename__ = "user_preferences"

    id: str = Field(primary_key=True, max_length=64)  # the user id
    active_workspace_id: str | None = Field(default=None, max_length=64)
    updated_at: datetime = Field(default_factory=utc_now)
