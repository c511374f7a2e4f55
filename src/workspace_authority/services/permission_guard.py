"""Authorization checks for every tenant-scoped operation."""

from typing import TYPE_CHECKING

from src.workspace_authority.core.exceptions import (
    InsufficientPermission,
    MembershipIntegrityError,
    NotAMember,
)
from src.workspace_authority.core.logging import get_logger
from src.workspace_authority.core.security import has_permission, required_role
from src.workspace_authority.models import Permission, WorkspaceMember, WorkspaceRole
from src.workspace_authority.repositories import MembershipRepository

if TYPE_CHECKING:
    from src.workspace_authority.services.context_service import CallerContext

logger = get_logger(__name__)


async def load_single_membership(
    membership_repo: MembershipRepository, workspace_id: str, user_id: str
) -> WorkspaceMember:
    """Fetch the one membership for a (workspace, user) pair.

    Raises:
        NotAMember: If there is none
        MembershipIntegrityError: If there is more than one
    """
    memberships = await membership_repo.find_memberships(workspace_id, user_id)

    if not memberships:
        raise NotAMember(workspace_id, user_id)

    if len(memberships) > 1:
        logger.critical(
            "Duplicate workspace memberships detected",
            workspace_id=workspace_id,
            user_id=user_id,
            membership_count=len(memberships),
        )
        raise MembershipIntegrityError(workspace_id, user_id, len(memberships))

    return memberships[0]


class PermissionGuard:
    """Re-reads membership on every call and applies the role policy.

    Never trusts an earlier resolution: a role change or removal takes
    effect on the caller's very next check.
    """

    def __init__(self, membership_repo: MembershipRepository):
        self.membership_repo = membership_repo

    async def require_permission(
        self,
        workspace_id: str,
        user_id: str,
        action: Permission | str,
    ) -> WorkspaceRole:
        """Return the caller's role if it permits the action.

        Raises:
            NotAMember: If the user has no membership in the workspace
            MembershipIntegrityError: If the user has more than one
            InsufficientPermission: If the role ranks below the action's minimum
        """
        action = Permission(action)
        membership = await load_single_membership(self.membership_repo, workspace_id, user_id)
        role = membership.role_enum

        if not has_permission(role, action):
            raise InsufficientPermission(
                action=action.value,
                required_role=required_role(action).value,
                role=role.value,
            )

        return role

    async def require_context_permission(
        self,
        context: "CallerContext",
        action: Permission | str,
    ) -> WorkspaceRole:
        """Same as require_permission, for an already resolved caller context."""
        return await self.require_permission(context.workspace_id, context.user_id, action)
