"""Repository for WorkspaceMember entity."""

from src.workspace_authority.models import WorkspaceMember, WorkspaceRole
from src.workspace_authority.repositories.base import BaseRepository
from src.workspace_authority.store import eq


class MembershipRepository(BaseRepository[WorkspaceMember]):
    """Repository for user-workspace memberships."""

    model = WorkspaceMember

    async def find_memberships(self, workspace_id: str, user_id: str) -> list[WorkspaceMember]:
        """All memberships for a (workspace, user) pair.

        Returns every match rather than the first, so callers can detect a
        broken uniqueness guarantee.
        """
        return await self.store.list_documents(
            WorkspaceMember,
            [eq("workspace_id", workspace_id), eq("user_id", user_id)],
        )

    async def membership_exists(self, workspace_id: str, user_id: str) -> bool:
        memberships = await self.store.list_documents(
            WorkspaceMember,
            [eq("workspace_id", workspace_id), eq("user_id", user_id)],
            limit=1,
        )
        return len(memberships) > 0

    async def get_any_for_user(self, user_id: str) -> WorkspaceMember | None:
        """First membership found for a user, in no particular order."""
        memberships = await self.store.list_documents(
            WorkspaceMember, [eq("user_id", user_id)], limit=1
        )
        return memberships[0] if memberships else None

    async def list_for_user(self, user_id: str, limit: int = 100) -> list[WorkspaceMember]:
        """List a user's memberships across workspaces."""
        return await self.store.list_documents(
            WorkspaceMember, [eq("user_id", user_id)], limit=limit
        )

    async def list_for_workspace_paginated(
        self, workspace_id: str, cursor: str | None, limit: int
    ) -> tuple[list[WorkspaceMember], str | None, bool]:
        """List members of a workspace with cursor-based pagination.

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        return await self.store.paginate(
            WorkspaceMember,
            [eq("workspace_id", workspace_id)],
            cursor,
            limit,
            cursor_field="joined_at",
        )

    async def create_membership(
        self,
        workspace_id: str,
        user_id: str,
        role: str = WorkspaceRole.VIEWER.value,
    ) -> WorkspaceMember:
        """Create a new membership.

        Raises:
            ConstraintViolationError: If the pair already has a membership
        """
        return await self.add(
            WorkspaceMember(workspace_id=workspace_id, user_id=user_id, role=role)
        )
