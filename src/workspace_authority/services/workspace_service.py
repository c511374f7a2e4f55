"""Workspace and member management."""

from dataclasses import dataclass

from src.workspace_authority.core.logging import get_logger
from src.workspace_authority.core.security import CallerIdentity
from src.workspace_authority.models import (
    Permission,
    Workspace,
    WorkspaceMember,
    WorkspaceRole,
)
from src.workspace_authority.repositories import (
    MembershipRepository,
    PreferenceRepository,
    WorkspaceRepository,
)
from src.workspace_authority.services.permission_guard import PermissionGuard

logger = get_logger(__name__)


class MemberNotFound(LookupError):
    """No such membership in the given workspace."""


class CannotRemoveOwner(ValueError):
    def __init__(self) -> None:
        super().__init__("Cannot remove workspace owner")


class CannotRemoveSelf(ValueError):
    def __init__(self) -> None:
        super().__init__("Cannot remove yourself. Use the leave workspace option instead.")


@dataclass(frozen=True)
class WorkspaceWithRole:
    workspace: Workspace
    role: WorkspaceRole


class WorkspaceService:
    """Service for workspace lifecycle and membership administration."""

    def __init__(
        self,
        workspace_repo: WorkspaceRepository,
        membership_repo: MembershipRepository,
        preference_repo: PreferenceRepository,
        guard: PermissionGuard,
        default_currency: str = "AUD",
    ):
        self.workspace_repo = workspace_repo
        self.membership_repo = membership_repo
        self.preference_repo = preference_repo
        self.guard = guard
        self.default_currency = default_currency

    async def create_workspace(
        self, user_id: str, name: str, currency: str | None = None
    ) -> Workspace:
        """Create a workspace owned by the user and make it their active one."""
        name = name.strip()
        if not name:
            raise ValueError("Workspace name is required")

        workspace = await self.workspace_repo.add(
            Workspace(
                name=name,
                currency=(currency or self.default_currency).strip().upper(),
                owner_id=user_id,
            )
        )
        await self.membership_repo.create_membership(
            workspace_id=workspace.id,
            user_id=user_id,
            role=WorkspaceRole.OWNER.value,
        )
        await self.preference_repo.set_active_workspace_id(user_id, workspace.id)

        logger.info("Workspace created", workspace_id=workspace.id, owner_id=user_id)
        return workspace

    async def list_workspaces_for_user(self, user_id: str) -> list[WorkspaceWithRole]:
        """Workspaces the user belongs to, each with the user's role.

        Memberships pointing at a deleted workspace are skipped.
        """
        memberships = await self.membership_repo.list_for_user(user_id)
        result = []
        for membership in memberships:
            workspace = await self.workspace_repo.get_by_id(membership.workspace_id)
            if workspace is None:
                continue
            result.append(WorkspaceWithRole(workspace=workspace, role=membership.role_enum))
        return result

    async def get_workspace(self, workspace_id: str) -> Workspace | None:
        return await self.workspace_repo.get_by_id(workspace_id)

    async def switch_workspace(self, user_id: str, workspace_id: str) -> WorkspaceRole:
        """Make a workspace the user's active one. Requires membership."""
        role = await self.guard.require_permission(workspace_id, user_id, Permission.READ)
        await self.preference_repo.set_active_workspace_id(user_id, workspace_id)
        logger.info("Active workspace switched", user_id=user_id, workspace_id=workspace_id)
        return role

    async def list_members(
        self,
        workspace_id: str,
        acting_user_id: str,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[WorkspaceMember], str | None, bool]:
        """List members of a workspace, newest first. Requires read."""
        await self.guard.require_permission(workspace_id, acting_user_id, Permission.READ)
        return await self.membership_repo.list_for_workspace_paginated(
            workspace_id, cursor, limit
        )

    async def remove_member(
        self, workspace_id: str, member_id: str, acting_user_id: str
    ) -> WorkspaceMember:
        """Remove a membership. Requires admin.

        Raises:
            MemberNotFound: If the membership does not exist in this workspace
            CannotRemoveOwner: If the membership is an owner's
            CannotRemoveSelf: If the caller targets their own membership
        """
        await self.guard.require_permission(workspace_id, acting_user_id, Permission.ADMIN)

        membership = await self.membership_repo.get_by_id(member_id)
        if membership is None or membership.workspace_id != workspace_id:
            raise MemberNotFound(member_id)

        if membership.role_enum == WorkspaceRole.OWNER:
            raise CannotRemoveOwner()

        if membership.user_id == acting_user_id:
            raise CannotRemoveSelf()

        await self.membership_repo.delete_by_id(member_id)
        logger.info(
            "Member removed",
            workspace_id=workspace_id,
            member_id=member_id,
            removed_user_id=membership.user_id,
        )
        return membership

    async def ensure_user_has_workspace(self, identity: CallerIdentity) -> str:
        """Return the user's active workspace id, creating one if they have none."""
        active = await self.preference_repo.get_active_workspace_id(identity.user_id)
        if active is not None:
            return active

        membership = await self.membership_repo.get_any_for_user(identity.user_id)
        if membership is not None:
            await self.preference_repo.set_active_workspace_id(
                identity.user_id, membership.workspace_id
            )
            return membership.workspace_id

        display_name = identity.name or (identity.email.split("@")[0] if identity.email else "My")
        workspace = await self.create_workspace(identity.user_id, f"{display_name}'s Workspace")
        return workspace.id
