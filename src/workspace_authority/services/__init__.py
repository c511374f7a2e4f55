"""Service layer - business logic."""

from src.workspace_authority.services.audit_service import AuditService
from src.workspace_authority.services.context_service import (
    CallerContext,
    ContextService,
    NeedsOnboarding,
)
from src.workspace_authority.services.invitation_service import (
    INVITATION_EXPIRY,
    InvitationService,
)
from src.workspace_authority.services.permission_guard import (
    PermissionGuard,
    load_single_membership,
)
from src.workspace_authority.services.workspace_service import (
    CannotRemoveOwner,
    CannotRemoveSelf,
    MemberNotFound,
    WorkspaceService,
    WorkspaceWithRole,
)

__all__ = [
    "INVITATION_EXPIRY",
    "AuditService",
    "CallerContext",
    "CannotRemoveOwner",
    "CannotRemoveSelf",
    "ContextService",
    "InvitationService",
    "MemberNotFound",
    "NeedsOnboarding",
    "PermissionGuard",
    "WorkspaceService",
    "WorkspaceWithRole",
    "load_single_membership",
]
