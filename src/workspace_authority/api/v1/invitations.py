"""Invitation API endpoints."""

import asyncio

from fastapi import APIRouter, Query, status

from src.workspace_authority.api.dependencies import (
    AuditServiceDep,
    Guard,
    Identity,
    InvitationServiceDep,
    PreferenceRepo,
    WorkspaceServiceDep,
)
from src.workspace_authority.core.exceptions import InvitationEmailMismatch
from src.workspace_authority.core.notifications import send_invitation_email
from src.workspace_authority.models import AuditAction, Permission
from src.workspace_authority.schemas import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    InvitationCreateRequest,
    InvitationCreateResponse,
    InvitationInfoResponse,
    InvitationListResponse,
    InvitationRead,
)

workspace_router = APIRouter(
    prefix="/workspaces/{workspace_id}/invitations", tags=["invitations"]
)
router = APIRouter(prefix="/invitations", tags=["invitations"])


# =============================================================================
# Admin Endpoints (admin role on the workspace)
# =============================================================================


@workspace_router.get(
    "",
    response_model=InvitationListResponse,
    summary="List pending invitations",
)
async def list_invitations(
    workspace_id: str,
    identity: Identity,
    guard: Guard,
    invitation_service: InvitationServiceDep,
) -> InvitationListResponse:
    await guard.require_permission(workspace_id, identity.user_id, Permission.ADMIN)
    invitations = await invitation_service.list_pending_invitations(workspace_id)
    return InvitationListResponse(
        invitations=[InvitationRead.model_validate(inv) for inv in invitations],
        total=len(invitations),
    )


@workspace_router.post(
    "",
    response_model=InvitationCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create invitation",
    description="Invite an email address to the workspace and email them a link.",
)
async def create_invitation(
    workspace_id: str,
    request: InvitationCreateRequest,
    identity: Identity,
    guard: Guard,
    invitation_service: InvitationServiceDep,
    workspace_service: WorkspaceServiceDep,
    audit_service: AuditServiceDep,
) -> InvitationCreateResponse:
    await guard.require_permission(workspace_id, identity.user_id, Permission.ADMIN)

    invitation, token = await invitation_service.create_invitation(
        workspace_id=workspace_id,
        email=request.email,
        role=request.role,
        issuer_id=identity.user_id,
    )

    workspace = await workspace_service.get_workspace(workspace_id)
    # Resend is a blocking client
    email_sent = await asyncio.to_thread(
        send_invitation_email,
        to=invitation.email,
        token=token,
        workspace_name=workspace.name if workspace else "a workspace",
        role=invitation.role,
    )

    await audit_service.log_action(
        AuditAction.INVITATION_CREATE,
        workspace_id=workspace_id,
        user_id=identity.user_id,
        resource_type="invitation",
        resource_id=invitation.id,
        summary=f"Invited {invitation.email} as {invitation.role}",
        metadata={"email": invitation.email, "role": invitation.role},
    )

    return InvitationCreateResponse(
        **InvitationRead.model_validate(invitation).model_dump(),
        email_sent=email_sent,
    )


@workspace_router.delete(
    "/{invitation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel invitation",
)
async def cancel_invitation(
    workspace_id: str,
    invitation_id: str,
    identity: Identity,
    guard: Guard,
    invitation_service: InvitationServiceDep,
    audit_service: AuditServiceDep,
) -> None:
    """Cancel an invitation. Succeeds even if it is already gone."""
    await guard.require_permission(workspace_id, identity.user_id, Permission.ADMIN)

    invitation = await invitation_service.get_invitation(invitation_id)
    if invitation is None or invitation.workspace_id != workspace_id:
        return

    await invitation_service.cancel_invitation(invitation_id)
    await audit_service.log_action(
        AuditAction.INVITATION_CANCEL,
        workspace_id=workspace_id,
        user_id=identity.user_id,
        resource_type="invitation",
        resource_id=invitation_id,
        summary=f"Cancelled invitation for {invitation.email}",
    )


# =============================================================================
# Invitee Endpoints
# =============================================================================


@router.get(
    "/verify",
    response_model=InvitationInfoResponse,
    summary="Verify invitation token",
    description="Public. Shows what an invitation grants before it is accepted.",
)
async def verify_invitation(
    invitation_service: InvitationServiceDep,
    workspace_service: WorkspaceServiceDep,
    token: str = Query(min_length=1, max_length=256),
) -> InvitationInfoResponse:
    invitation = await invitation_service.verify_invitation_token(token)
    workspace = await workspace_service.get_workspace(invitation.workspace_id)
    return InvitationInfoResponse(
        workspace_id=invitation.workspace_id,
        workspace_name=workspace.name if workspace else "Unknown",
        email=invitation.email,
        role=invitation.role,
        expires_at=invitation.expires_at,
    )


@router.post(
    "/accept",
    response_model=AcceptInvitationResponse,
    summary="Accept invitation",
    description="Join the invited workspace and make it the caller's active workspace.",
)
async def accept_invitation(
    request: AcceptInvitationRequest,
    identity: Identity,
    invitation_service: InvitationServiceDep,
    preference_repo: PreferenceRepo,
    audit_service: AuditServiceDep,
) -> AcceptInvitationResponse:
    invitation = await invitation_service.verify_invitation_token(request.token)

    if not identity.email or identity.email.strip().lower() != invitation.email:
        raise InvitationEmailMismatch()

    membership = await invitation_service.accept_invitation(invitation, identity.user_id)
    await preference_repo.set_active_workspace_id(identity.user_id, invitation.workspace_id)

    await audit_service.log_action(
        AuditAction.INVITATION_ACCEPT,
        workspace_id=invitation.workspace_id,
        user_id=identity.user_id,
        resource_type="invitation",
        resource_id=invitation.id,
        summary=f"Accepted invitation as {membership.role}",
    )
    return AcceptInvitationResponse(
        workspace_id=invitation.workspace_id,
        role=membership.role,
    )
