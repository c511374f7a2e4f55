"""Audit log endpoints - workspace admins only."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.workspace_authority.api.dependencies import AuditServiceDep, Guard, Identity
from src.workspace_authority.models import AuditAction, Permission
from src.workspace_authority.schemas import AuditLogRead, PaginatedResponse

router = APIRouter(prefix="/workspaces/{workspace_id}/audit-logs", tags=["audit"])

CursorQuery = Annotated[str | None, Query(description="Pagination cursor")]
LimitQuery = Annotated[int, Query(ge=1, le=100, description="Items per page")]
ActionQuery = Annotated[AuditAction | None, Query(description="Filter by action type")]


@router.get(
    "",
    response_model=PaginatedResponse[AuditLogRead],
    summary="List audit logs",
    responses={403: {"description": "Admin role on the workspace required"}},
)
async def list_audit_logs(
    workspace_id: str,
    identity: Identity,
    guard: Guard,
    audit_service: AuditServiceDep,
    cursor: CursorQuery = None,
    limit: LimitQuery = 50,
    action: ActionQuery = None,
) -> PaginatedResponse[AuditLogRead]:
    """Membership-affecting actions in the workspace, newest first."""
    await guard.require_permission(workspace_id, identity.user_id, Permission.ADMIN)

    logs, next_cursor, has_more = await audit_service.list_logs(
        workspace_id,
        cursor=cursor,
        limit=limit,
        action=action.value if action else None,
    )
    return PaginatedResponse[AuditLogRead](
        items=[AuditLogRead.model_validate(log) for log in logs],
        next_cursor=next_cursor,
        has_more=has_more,
    )
