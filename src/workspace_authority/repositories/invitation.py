"""Repository for WorkspaceInvitation entity."""

from datetime import datetime

from src.workspace_authority.models import WorkspaceInvitation
from src.workspace_authority.repositories.base import BaseRepository
from src.workspace_authority.store import eq, gt, is_null


class InvitationRepository(BaseRepository[WorkspaceInvitation]):
    """Repository for workspace invitations."""

    model = WorkspaceInvitation

    async def get_unaccepted_by_hash(self, token_hash: str) -> WorkspaceInvitation | None:
        """Get an unaccepted invitation by token hash, expired or not."""
        invitations = await self.store.list_documents(
            WorkspaceInvitation,
            [eq("token_hash", token_hash), is_null("accepted_at")],
            limit=1,
        )
        return invitations[0] if invitations else None

    async def list_unaccepted_for_email(
        self, workspace_id: str, email: str
    ) -> list[WorkspaceInvitation]:
        """Unaccepted invitations for an email in a workspace, expired or not."""
        return await self.store.list_documents(
            WorkspaceInvitation,
            [
                eq("workspace_id", workspace_id),
                eq("email", email),
                is_null("accepted_at"),
            ],
        )

    async def list_pending(self, workspace_id: str, now: datetime) -> list[WorkspaceInvitation]:
        """Unaccepted, unexpired invitations for a workspace, newest first."""
        return await self.store.list_documents(
            WorkspaceInvitation,
            [
                eq("workspace_id", workspace_id),
                is_null("accepted_at"),
                gt("expires_at", now),
            ],
            order_by="created_at",
            descending=True,
        )

    async def mark_accepted(
        self, invitation_id: str, accepted_at: datetime
    ) -> WorkspaceInvitation | None:
        """Stamp accepted_at. Returns None if the invitation no longer exists."""
        return await self.store.update_document(
            WorkspaceInvitation, invitation_id, {"accepted_at": accepted_at}
        )
