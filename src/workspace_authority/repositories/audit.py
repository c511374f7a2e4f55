"""Repository for AuditLog entity."""

from src.workspace_authority.models import AuditLog
from src.workspace_authority.repositories.base import BaseRepository
from src.workspace_authority.store import eq


class AuditLogRepository(BaseRepository[AuditLog]):
    """Repository for the append-only audit trail."""

    model = AuditLog

    async def list_by_workspace(
        self,
        workspace_id: str,
        cursor: str | None = None,
        limit: int = 50,
        action: str | None = None,
    ) -> tuple[list[AuditLog], str | None, bool]:
        """List audit logs for a workspace with cursor pagination.

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        filters = [eq("workspace_id", workspace_id)]
        if action:
            filters.append(eq("action", action))
        return await self.store.paginate(AuditLog, filters, cursor, limit)
