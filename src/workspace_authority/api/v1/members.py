"""Workspace member API endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from src.workspace_authority.api.dependencies import (
    AuditServiceDep,
    Identity,
    WorkspaceServiceDep,
)
from src.workspace_authority.models import AuditAction
from src.workspace_authority.schemas import MemberRead, PaginatedResponse
from src.workspace_authority.services import (
    CannotRemoveOwner,
    CannotRemoveSelf,
    MemberNotFound,
)

router = APIRouter(prefix="/workspaces/{workspace_id}/members", tags=["members"])


@router.get(
    "",
    response_model=PaginatedResponse[MemberRead],
    summary="List members",
)
async def list_members(
    workspace_id: str,
    identity: Identity,
    workspace_service: WorkspaceServiceDep,
    cursor: str | None = None,
    limit: int = Query(default=50, ge=1, le=100),
) -> PaginatedResponse[MemberRead]:
    items, next_cursor, has_more = await workspace_service.list_members(
        workspace_id, identity.user_id, cursor=cursor, limit=limit
    )
    return PaginatedResponse[MemberRead](
        items=[MemberRead.model_validate(item) for item in items],
        next_cursor=next_cursor,
        has_more=has_more,
    )


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove member",
    description="Remove a member from the workspace. Admin role required. Owners cannot be removed.",
)
async def remove_member(
    workspace_id: str,
    member_id: str,
    identity: Identity,
    workspace_service: WorkspaceServiceDep,
    audit_service: AuditServiceDep,
) -> None:
    try:
        removed = await workspace_service.remove_member(
            workspace_id, member_id, identity.user_id
        )
    except MemberNotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Member not found"
        ) from e
    except CannotRemoveOwner as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except CannotRemoveSelf as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    await audit_service.log_action(
        AuditAction.MEMBER_REMOVE,
        workspace_id=workspace_id,
        user_id=identity.user_id,
        resource_type="member",
        resource_id=member_id,
        summary=f"Removed member {removed.user_id}",
        metadata={"removed_user_id": removed.user_id, "role": removed.role},
    )
