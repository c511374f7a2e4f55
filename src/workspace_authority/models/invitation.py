"""Workspace invitation model."""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.workspace_authority.models.base import new_id, utc_now
from src.workspace_authority.models.enums import WorkspaceRole


class WorkspaceInvitation(SQLModel, table=True):
    """Pending offer to join a workspace.

    Only the keyed hash of the invitation token is stored. An invitation is
    pending while ``accepted_at`` is null; expiry is checked at read time.
    """

    __tablename__ = "workspace_invitations"
    __table_args__ = (
        Index("ix_workspace_invitations_workspace_email", "workspace_id", "email"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    workspace_id: str = Field(foreign_key="workspaces.id", max_length=64, index=True)
    email: str = Field(max_length=255)
    role: str = Field(default=WorkspaceRole.VIEWER.value, max_length=20)
    token_hash: str = Field(max_length=128, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime
    created_by_id: str = Field(max_length=64)
    accepted_at: datetime | None = Field(default=None)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check expiry against wall-clock time (naive UTC)."""
        return self.expires_at < (now or utc_now())
