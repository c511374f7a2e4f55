"""Model exports.

Import from here: `from src.workspace_authority.models import Workspace, WorkspaceMember`
"""

from src.workspace_authority.models.audit import AuditLog
from src.workspace_authority.models.base import new_id, utc_now
from src.workspace_authority.models.enums import AuditAction, Permission, WorkspaceRole
from src.workspace_authority.models.invitation import WorkspaceInvitation
from src.workspace_authority.models.preference import UserPreference
from src.workspace_authority.models.workspace import Workspace, WorkspaceMember

__all__ = [
    # Enums
    "AuditAction",
    "Permission",
    "WorkspaceRole",
    # Models
    "AuditLog",
    "UserPreference",
    "Workspace",
    "WorkspaceInvitation",
    "WorkspaceMember",
    # Helpers
    "new_id",
    "utc_now",
]
