"""Repository for UserPreference entity."""

from src.workspace_authority.core.logging import get_logger
from src.workspace_authority.models import UserPreference, utc_now
from src.workspace_authority.repositories.base import BaseRepository
from src.workspace_authority.store.base import ConstraintViolationError

logger = get_logger(__name__)


class PreferenceRepository(BaseRepository[UserPreference]):
    """Repository for per-user preferences kept by the identity layer."""

    model = UserPreference

    async def get_active_workspace_id(self, user_id: str) -> str | None:
        preference = await self.get_by_id(user_id)
        return preference.active_workspace_id if preference else None

    async def set_active_workspace_id(self, user_id: str, workspace_id: str) -> UserPreference:
        """Upsert the user's preferred active workspace."""
        updated = await self._update_active_workspace(user_id, workspace_id)
        if updated is not None:
            return updated

        try:
            return await self.add(UserPreference(id=user_id, active_workspace_id=workspace_id))
        except ConstraintViolationError:
            updated = await self._update_active_workspace(user_id, workspace_id)
            if updated is None:
                raise
            logger.info("Preference created concurrently - updated instead", user_id=user_id)
            return updated

    async def _update_active_workspace(
        self, user_id: str, workspace_id: str
    ) -> UserPreference | None:
        return await self.store.update_document(
            UserPreference,
            user_id,
            {"active_workspace_id": workspace_id, "updated_at": utc_now()},
        )
