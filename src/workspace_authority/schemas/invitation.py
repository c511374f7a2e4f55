"""Invitation schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field


class InvitationCreateRequest(BaseModel):
    """Request to invite someone to a workspace."""

    email: EmailStr
    role: Literal["viewer", "editor", "admin"] = "viewer"


class InvitationRead(BaseModel):
    """Admin view of an invitation. Never carries the token."""

    id: str
    workspace_id: str
    email: str
    role: str
    created_at: datetime
    expires_at: datetime
    created_by_id: str

    model_config = {"from_attributes": True}


class InvitationCreateResponse(InvitationRead):
    email_sent: bool = True


class InvitationListResponse(BaseModel):
    invitations: list[InvitationRead]
    total: int


class InvitationInfoResponse(BaseModel):
    """Public info shown on the accept screen."""

    workspace_id: str
    workspace_name: str
    email: str
    role: str
    expires_at: datetime


class AcceptInvitationRequest(BaseModel):
    token: str = Field(min_length=1, max_length=256)


class AcceptInvitationResponse(BaseModel):
    workspace_id: str
    role: str
