"""Invitation lifecycle: issue, verify, accept, cancel."""

from datetime import timedelta

from src.workspace_authority.core.exceptions import InvalidOrExpiredInvitation
from src.workspace_authority.core.logging import get_logger
from src.workspace_authority.core.security import TokenCodec
from src.workspace_authority.models import (
    WorkspaceInvitation,
    WorkspaceMember,
    WorkspaceRole,
    utc_now,
)
from src.workspace_authority.repositories import InvitationRepository, MembershipRepository
from src.workspace_authority.store import ConstraintViolationError

logger = get_logger(__name__)

INVITATION_EXPIRY = timedelta(days=7)


class InvitationService:
    """Issues and redeems single-use, time-limited workspace invitations.

    Authorization is the caller's job: create and cancel assume the issuer
    already passed an admin check on the workspace.
    """

    def __init__(
        self,
        invitation_repo: InvitationRepository,
        membership_repo: MembershipRepository,
        codec: TokenCodec,
    ):
        self.invitation_repo = invitation_repo
        self.membership_repo = membership_repo
        self.codec = codec

    async def create_invitation(
        self,
        workspace_id: str,
        email: str,
        role: WorkspaceRole | str,
        issuer_id: str,
    ) -> tuple[WorkspaceInvitation, str]:
        """Issue an invitation, superseding any unaccepted one for the same email.

        Returns (invitation, plaintext_token). The token is not stored or
        logged anywhere; this is the only time it is available.
        """
        email = email.strip().lower()
        role = WorkspaceRole(role)

        superseded = await self.invitation_repo.list_unaccepted_for_email(workspace_id, email)
        for previous in superseded:
            await self.invitation_repo.delete_by_id(previous.id)

        token = self.codec.generate_token()
        now = utc_now()
        invitation = await self.invitation_repo.add(
            WorkspaceInvitation(
                workspace_id=workspace_id,
                email=email,
                role=role.value,
                token_hash=self.codec.hash(token),
                created_at=now,
                expires_at=now + INVITATION_EXPIRY,
                created_by_id=issuer_id,
            )
        )

        logger.info(
            "Invitation created",
            invitation_id=invitation.id,
            workspace_id=workspace_id,
            role=role.value,
            created_by=issuer_id,
            superseded=len(superseded),
        )
        return invitation, token

    async def verify_invitation_token(self, token: str) -> WorkspaceInvitation:
        """Look up a pending, unexpired invitation by its token.

        Safe to call unauthenticated.

        Raises:
            InvalidOrExpiredInvitation: For unknown, accepted or expired tokens alike
        """
        invitation = await self.invitation_repo.get_unaccepted_by_hash(self.codec.hash(token))

        if invitation is None or invitation.is_expired():
            raise InvalidOrExpiredInvitation()

        return invitation

    async def accept_invitation(
        self, invitation: WorkspaceInvitation, user_id: str
    ) -> WorkspaceMember:
        """Join the invited user to the workspace and mark the invitation accepted.

        Idempotent: an existing membership is kept as is (including its role),
        and a concurrent accept that wins the insert counts as already joined.
        Membership is written before accepted_at is stamped.
        """
        membership = await self._ensure_membership(invitation, user_id)

        await self.invitation_repo.mark_accepted(invitation.id, utc_now())

        logger.info(
            "Invitation accepted",
            invitation_id=invitation.id,
            workspace_id=invitation.workspace_id,
            user_id=user_id,
        )
        return membership

    async def _ensure_membership(
        self, invitation: WorkspaceInvitation, user_id: str
    ) -> WorkspaceMember:
        existing = await self.membership_repo.find_memberships(invitation.workspace_id, user_id)
        if existing:
            return existing[0]

        try:
            return await self.membership_repo.create_membership(
                workspace_id=invitation.workspace_id,
                user_id=user_id,
                role=invitation.role,
            )
        except ConstraintViolationError:
            existing = await self.membership_repo.find_memberships(
                invitation.workspace_id, user_id
            )
            if not existing:
                raise
            logger.info(
                "Membership created concurrently - treating as already a member",
                workspace_id=invitation.workspace_id,
                user_id=user_id,
            )
            return existing[0]

    async def cancel_invitation(self, invitation_id: str) -> None:
        """Delete an invitation. A no-op if it is already gone."""
        deleted = await self.invitation_repo.delete_by_id(invitation_id)
        logger.info("Invitation cancelled", invitation_id=invitation_id, deleted=deleted)

    async def list_pending_invitations(self, workspace_id: str) -> list[WorkspaceInvitation]:
        """Unaccepted invitations that have not yet expired, newest first."""
        return await self.invitation_repo.list_pending(workspace_id, utc_now())

    async def get_invitation(self, invitation_id: str) -> WorkspaceInvitation | None:
        return await self.invitation_repo.get_by_id(invitation_id)
