"""Role hierarchy and the fixed action policy."""

from src.workspace_authority.models.enums import Permission, WorkspaceRole

ROLE_ORDINALS: dict[WorkspaceRole, int] = {
    WorkspaceRole.VIEWER: 0,
    WorkspaceRole.EDITOR: 1,
    WorkspaceRole.ADMIN: 2,
    WorkspaceRole.OWNER: 3,
}

# Minimum role for each action. delete and admin share the admin level.
MINIMUM_ROLE: dict[Permission, WorkspaceRole] = {
    Permission.READ: WorkspaceRole.VIEWER,
    Permission.WRITE: WorkspaceRole.EDITOR,
    Permission.DELETE: WorkspaceRole.ADMIN,
    Permission.ADMIN: WorkspaceRole.ADMIN,
    Permission.OWNER: WorkspaceRole.OWNER,
}


def role_ordinal(role: WorkspaceRole | str) -> int:
    return ROLE_ORDINALS[WorkspaceRole(role)]


def required_role(permission: Permission | str) -> WorkspaceRole:
    """Lowest role that satisfies the given action."""
    return MINIMUM_ROLE[Permission(permission)]


def has_permission(role: WorkspaceRole | str, permission: Permission | str) -> bool:
    """Allow iff the role ranks at or above the action's minimum role."""
    return role_ordinal(role) >= ROLE_ORDINALS[required_role(permission)]
