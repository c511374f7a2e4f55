"""Audit log model for tracking membership-affecting actions."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Column, Index
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from src.workspace_authority.models.base import new_id, utc_now


class AuditLog(SQLModel, table=True):
    """Append-only audit entry. Never updated or deleted by the application."""

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("ix_audit_logs_workspace_created", "workspace_id", "created_at"),
        Index("ix_audit_logs_resource", "resource_type", "resource_id"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    # Context
    workspace_id: str = Field(max_length=64, index=True)
    user_id: str = Field(max_length=64, index=True)

    # Action details
    action: str = Field(max_length=50)  # AuditAction value
    resource_type: str = Field(max_length=50)  # "invitation", "member", "workspace"
    resource_id: str = Field(max_length=64)
    summary: str = Field(max_length=500)

    metadata_: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column("metadata", JSON().with_variant(JSONB(), "postgresql"), nullable=True),
    )

    # Request metadata
    ip_address: str | None = Field(max_length=45, default=None)  # IPv4/IPv6
    request_id: str | None = Field(max_length=36, default=None)  # Correlation ID

    created_at: datetime = Field(default_factory=utc_now)
