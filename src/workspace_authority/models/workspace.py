"""Workspace and membership models."""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.workspace_authority.models.base import new_id, utc_now
from src.workspace_authority.models.enums import WorkspaceRole


class Workspace(SQLModel, table=True):
    """Tenant boundary. Every tenant-scoped record carries a workspace id."""

    __tablename__ = "workspaces"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    name: str = Field(max_length=100)
    currency: str = Field(default="AUD", max_length=3)
    owner_id: str = Field(max_length=64, index=True)
    created_at: datetime = Field(default_factory=utc_now)


class WorkspaceMember(SQLModel, table=True):
    """Binds one user to one workspace with a role.

    The unique index on (workspace_id, user_id) is the store-level guarantee;
    readers still treat more than one match as a data integrity failure.
    """

    __tablename__ = "workspace_members"
    __table_args__ = (
        Index(
            "uq_workspace_members_workspace_user",
            "workspace_id",
            "user_id",
            unique=True,
        ),
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    workspace_id: str = Field(foreign_key="workspaces.id", max_length=64, index=True)
    user_id: str = Field(max_length=64, index=True)
    role: str = Field(default=WorkspaceRole.VIEWER.value, max_length=20)
    joined_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> WorkspaceRole:
        """Get role as WorkspaceRole enum."""
        return WorkspaceRole(self.role)
