"""Request and response schemas."""

from src.workspace_authority.schemas.audit import AuditLogRead
from src.workspace_authority.schemas.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    InvitationCreateRequest,
    InvitationCreateResponse,
    InvitationInfoResponse,
    InvitationListResponse,
    InvitationRead,
)
from src.workspace_authority.schemas.pagination import PaginatedResponse
from src.workspace_authority.schemas.workspace import (
    CurrentContextResponse,
    MemberRead,
    SwitchWorkspaceRequest,
    WorkspaceCreate,
    WorkspaceListResponse,
    WorkspaceRead,
)

__all__ = [
    "AuditLogRead",
    "AcceptInvitationRequest",
    "AcceptInvitationResponse",
    "CurrentContextResponse",
    "InvitationCreateRequest",
    "InvitationCreateResponse",
    "InvitationInfoResponse",
    "InvitationListResponse",
    "InvitationRead",
    "MemberRead",
    "PaginatedResponse",
    "SwitchWorkspaceRequest",
    "WorkspaceCreate",
    "WorkspaceListResponse",
    "WorkspaceRead",
]
