"""Workspace and member schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class WorkspaceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    currency: str | None = Field(default=None, min_length=3, max_length=3)


class WorkspaceRead(BaseModel):
    id: str
    name: str
    currency: str
    owner_id: str
    role: str


class WorkspaceListResponse(BaseModel):
    workspaces: list[WorkspaceRead]
    current_workspace_id: str | None = None


class SwitchWorkspaceRequest(BaseModel):
    workspace_id: str = Field(min_length=1, max_length=64)


class CurrentContextResponse(BaseModel):
    """The caller's resolved workspace and role."""

    user_id: str
    workspace_id: str
    workspace_name: str | None
    role: str


class MemberRead(BaseModel):
    id: str
    workspace_id: str
    user_id: str
    role: str
    joined_at: datetime

    model_config = {"from_attributes": True}
