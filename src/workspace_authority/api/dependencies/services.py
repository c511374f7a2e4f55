"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from src.workspace_authority.api.dependencies.repositories import (
    AuditLogRepo,
    InvitationRepo,
    MembershipRepo,
    PreferenceRepo,
    WorkspaceRepo,
)
from src.workspace_authority.core.config import get_settings
from src.workspace_authority.core.security import TokenCodec
from src.workspace_authority.services import (
    AuditService,
    ContextService,
    InvitationService,
    PermissionGuard,
    WorkspaceService,
)


def get_token_codec(request: Request) -> TokenCodec:
    """Process-wide codec built at startup."""
    return request.app.state.token_codec


Codec = Annotated[TokenCodec, Depends(get_token_codec)]


def get_permission_guard(membership_repo: MembershipRepo) -> PermissionGuard:
    return PermissionGuard(membership_repo)


Guard = Annotated[PermissionGuard, Depends(get_permission_guard)]


def get_context_service(
    membership_repo: MembershipRepo,
    preference_repo: PreferenceRepo,
) -> ContextService:
    return ContextService(membership_repo, preference_repo)


def get_invitation_service(
    invitation_repo: InvitationRepo,
    membership_repo: MembershipRepo,
    codec: Codec,
) -> InvitationService:
    return InvitationService(invitation_repo, membership_repo, codec)


def get_workspace_service(
    workspace_repo: WorkspaceRepo,
    membership_repo: MembershipRepo,
    preference_repo: PreferenceRepo,
    guard: Guard,
) -> WorkspaceService:
    return WorkspaceService(
        workspace_repo,
        membership_repo,
        preference_repo,
        guard,
        default_currency=get_settings().default_workspace_currency,
    )


def get_audit_service(audit_repo: AuditLogRepo) -> AuditService:
    return AuditService(audit_repo)


ContextServiceDep = Annotated[ContextService, Depends(get_context_service)]
InvitationServiceDep = Annotated[InvitationService, Depends(get_invitation_service)]
WorkspaceServiceDep = Annotated[WorkspaceService, Depends(get_workspace_service)]
AuditServiceDep = Annotated[AuditService, Depends(get_audit_service)]
