"""Audit trail for membership-affecting actions."""

from typing import Any

from src.workspace_authority.core.audit_context import get_request_metadata
from src.workspace_authority.core.logging import get_logger
from src.workspace_authority.models import AuditAction, AuditLog
from src.workspace_authority.repositories import AuditLogRepository

logger = get_logger(__name__)


class AuditService:
    """Records audit log entries.

    Fire-and-forget: a failed write is logged and swallowed so it never
    undoes the business operation that triggered it.
    """

    def __init__(self, audit_repo: AuditLogRepository):
        self.audit_repo = audit_repo

    async def log_action(
        self,
        action: AuditAction | str,
        workspace_id: str,
        user_id: str,
        resource_type: str,
        resource_id: str,
        summary: str,
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog | None:
        """Record an audit entry, enriched with the current request's metadata.

        Returns:
            The created AuditLog, or None if recording failed
        """
        action_value = action.value if isinstance(action, AuditAction) else action
        try:
            request = get_request_metadata()
            entry = AuditLog(
                workspace_id=workspace_id,
                user_id=user_id,
                action=action_value,
                resource_type=resource_type,
                resource_id=resource_id,
                summary=summary[:500],
                metadata_=metadata,
                ip_address=request.ip_address if request else None,
                request_id=request.request_id if request else None,
            )
            entry = await self.audit_repo.add(entry)
            logger.debug(
                "Audit log recorded",
                action=action_value,
                resource_type=resource_type,
                resource_id=resource_id,
            )
            return entry
        except Exception as e:
            logger.warning(
                "Failed to record audit log",
                action=action_value,
                resource_type=resource_type,
                error=str(e),
            )
            return None

    async def list_logs(
        self,
        workspace_id: str,
        cursor: str | None = None,
        limit: int = 50,
        action: str | None = None,
    ) -> tuple[list[AuditLog], str | None, bool]:
        """List audit logs for a workspace, newest first."""
        return await self.audit_repo.list_by_workspace(
            workspace_id, cursor=cursor, limit=limit, action=action
        )
