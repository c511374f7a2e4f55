"""Audit log schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AuditLogRead(BaseModel):
    id: str
    workspace_id: str
    user_id: str
    action: str
    resource_type: str
    resource_id: str
    summary: str
    # The table column is "metadata"; the model attribute is metadata_
    metadata: dict[str, Any] | None = Field(default=None, validation_alias="metadata_")
    ip_address: str | None
    request_id: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
