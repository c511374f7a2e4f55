"""Repository layer - typed access over the document store."""

from src.workspace_authority.repositories.audit import AuditLogRepository
from src.workspace_authority.repositories.base import BaseRepository
from src.workspace_authority.repositories.invitation import InvitationRepository
from src.workspace_authority.repositories.membership import MembershipRepository
from src.workspace_authority.repositories.preference import PreferenceRepository
from src.workspace_authority.repositories.workspace import WorkspaceRepository

__all__ = [
    "AuditLogRepository",
    "BaseRepository",
    "InvitationRepository",
    "MembershipRepository",
    "PreferenceRepository",
    "WorkspaceRepository",
]
