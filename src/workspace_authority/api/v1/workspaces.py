"""Workspace API endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.workspace_authority.api.dependencies import (
    AuditServiceDep,
    Context,
    Identity,
    PreferenceRepo,
    WorkspaceServiceDep,
)
from src.workspace_authority.models import AuditAction
from src.workspace_authority.schemas import (
    CurrentContextResponse,
    SwitchWorkspaceRequest,
    WorkspaceCreate,
    WorkspaceListResponse,
    WorkspaceRead,
)

router = APIRouter(prefix="/workspaces", tags=["workspaces"])


@router.get(
    "",
    response_model=WorkspaceListResponse,
    summary="List my workspaces",
)
async def list_workspaces(
    identity: Identity,
    workspace_service: WorkspaceServiceDep,
    preference_repo: PreferenceRepo,
) -> WorkspaceListResponse:
    """List the caller's workspaces with their role in each."""
    entries = await workspace_service.list_workspaces_for_user(identity.user_id)
    workspaces = [
        WorkspaceRead(
            id=entry.workspace.id,
            name=entry.workspace.name,
            currency=entry.workspace.currency,
            owner_id=entry.workspace.owner_id,
            role=entry.role.value,
        )
        for entry in entries
    ]
    current = await preference_repo.get_active_workspace_id(identity.user_id)
    if current is None and workspaces:
        current = workspaces[0].id
    return WorkspaceListResponse(workspaces=workspaces, current_workspace_id=current)


@router.post(
    "",
    response_model=WorkspaceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create workspace",
    description="Create a workspace owned by the caller and switch to it.",
)
async def create_workspace(
    request: WorkspaceCreate,
    identity: Identity,
    workspace_service: WorkspaceServiceDep,
    audit_service: AuditServiceDep,
) -> WorkspaceRead:
    try:
        workspace = await workspace_service.create_workspace(
            identity.user_id, request.name, request.currency
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    await audit_service.log_action(
        AuditAction.WORKSPACE_CREATE,
        workspace_id=workspace.id,
        user_id=identity.user_id,
        resource_type="workspace",
        resource_id=workspace.id,
        summary=f"Created workspace {workspace.name}",
    )
    return WorkspaceRead(
        id=workspace.id,
        name=workspace.name,
        currency=workspace.currency,
        owner_id=workspace.owner_id,
        role="owner",
    )


@router.post(
    "/switch",
    response_model=CurrentContextResponse,
    summary="Switch active workspace",
)
async def switch_workspace(
    request: SwitchWorkspaceRequest,
    identity: Identity,
    workspace_service: WorkspaceServiceDep,
    audit_service: AuditServiceDep,
) -> CurrentContextResponse:
    role = await workspace_service.switch_workspace(identity.user_id, request.workspace_id)
    workspace = await workspace_service.get_workspace(request.workspace_id)

    await audit_service.log_action(
        AuditAction.WORKSPACE_SWITCH,
        workspace_id=request.workspace_id,
        user_id=identity.user_id,
        resource_type="workspace",
        resource_id=request.workspace_id,
        summary="Switched active workspace",
    )
    return CurrentContextResponse(
        user_id=identity.user_id,
        workspace_id=request.workspace_id,
        workspace_name=workspace.name if workspace else None,
        role=role.value,
    )


@router.get(
    "/current",
    response_model=CurrentContextResponse,
    summary="Current workspace context",
    description="Resolve the caller's active workspace and role. 409 when onboarding is required.",
)
async def current_workspace(
    context: Context,
    workspace_service: WorkspaceServiceDep,
) -> CurrentContextResponse:
    workspace = await workspace_service.get_workspace(context.workspace_id)
    return CurrentContextResponse(
        user_id=context.user_id,
        workspace_id=context.workspace_id,
        workspace_name=workspace.name if workspace else None,
        role=context.role.value,
    )
