"""Resolves who the caller is acting as, and where."""

from dataclasses import dataclass

from src.workspace_authority.core.logging import get_logger
from src.workspace_authority.core.security import CallerIdentity
from src.workspace_authority.models import WorkspaceRole
from src.workspace_authority.repositories import MembershipRepository, PreferenceRepository
from src.workspace_authority.services.permission_guard import load_single_membership

logger = get_logger(__name__)


@dataclass(frozen=True)
class CallerContext:
    """Per-request view of the caller. Never persisted."""

    user_id: str
    workspace_id: str
    role: WorkspaceRole
    email: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class NeedsOnboarding:
    """The caller has no workspace yet and must create or join one."""

    user_id: str


class ContextService:
    """Turns an authenticated identity into a CallerContext."""

    def __init__(
        self,
        membership_repo: MembershipRepository,
        preference_repo: PreferenceRepository,
    ):
        self.membership_repo = membership_repo
        self.preference_repo = preference_repo

    async def resolve(self, identity: CallerIdentity) -> CallerContext | NeedsOnboarding:
        """Resolve the caller's active workspace and role.

        The stored preference wins. Without one, any membership of the user
        is adopted and saved as the new preference. A stale preference
        pointing at a workspace the user has left is not repaired here; it
        surfaces as NotAMember.

        Raises:
            NotAMember: If the candidate workspace has no membership for the user
            MembershipIntegrityError: If it has more than one
        """
        user_id = identity.user_id
        workspace_id = await self.preference_repo.get_active_workspace_id(user_id)

        if workspace_id is None:
            membership = await self.membership_repo.get_any_for_user(user_id)
            if membership is None:
                return NeedsOnboarding(user_id=user_id)

            workspace_id = membership.workspace_id
            await self.preference_repo.set_active_workspace_id(user_id, workspace_id)
            logger.info(
                "Adopted first membership as active workspace",
                user_id=user_id,
                workspace_id=workspace_id,
            )

        membership = await load_single_membership(self.membership_repo, workspace_id, user_id)

        return CallerContext(
            user_id=user_id,
            workspace_id=workspace_id,
            role=membership.role_enum,
            email=identity.email,
            name=identity.name,
        )
