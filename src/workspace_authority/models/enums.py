"""Shared enums for models."""

from enum import Enum


class WorkspaceRole(str, Enum):
    """User role within a workspace, lowest to highest."""

    VIEWER = "viewer"
    EDITOR = "editor"
    ADMIN = "admin"
    OWNER = "owner"


class Permission(str, Enum):
    """Coarse actions a caller may request against a workspace."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    ADMIN = "admin"
    OWNER = "owner"


class AuditAction(str, Enum):
    """Audit action types for type-safe logging."""

    # Workspace
    WORKSPACE_CREATE = "workspace.create"
    WORKSPACE_SWITCH = "workspace.switch"

    # Invitation
    INVITATION_CREATE = "invitation.create"
    INVITATION_ACCEPT = "invitation.accept"
    INVITATION_CANCEL = "invitation.cancel"

    # Membership
    MEMBER_REMOVE = "member.remove"
