"""Repository for Workspace entity."""

from src.workspace_authority.models import Workspace
from src.workspace_authority.repositories.base import BaseRepository


class WorkspaceRepository(BaseRepository[Workspace]):
    """Repository for workspaces."""

    model = Workspace

    async def get_many(self, workspace_ids: list[str]) -> list[Workspace]:
        """Fetch workspaces by id, skipping any that no longer exist."""
        workspaces = []
        for workspace_id in workspace_ids:
            workspace = await self.get_by_id(workspace_id)
            if workspace is not None:
                workspaces.append(workspace)
        return workspaces
