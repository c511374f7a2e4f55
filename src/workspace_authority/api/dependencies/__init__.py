"""FastAPI dependency injection definitions."""

from src.workspace_authority.api.dependencies.auth import (
    ONBOARDING_REQUIRED,
    Context,
    Identity,
    get_caller_context,
    get_caller_identity,
)
from src.workspace_authority.api.dependencies.repositories import (
    AuditLogRepo,
    InvitationRepo,
    MembershipRepo,
    PreferenceRepo,
    WorkspaceRepo,
)
from src.workspace_authority.api.dependencies.services import (
    AuditServiceDep,
    Codec,
    ContextServiceDep,
    Guard,
    InvitationServiceDep,
    WorkspaceServiceDep,
    get_token_codec,
)
from src.workspace_authority.api.dependencies.store import Store, get_store

__all__ = [
    "ONBOARDING_REQUIRED",
    "AuditLogRepo",
    "AuditServiceDep",
    "Codec",
    "Context",
    "ContextServiceDep",
    "Guard",
    "Identity",
    "InvitationRepo",
    "InvitationServiceDep",
    "MembershipRepo",
    "PreferenceRepo",
    "Store",
    "WorkspaceRepo",
    "WorkspaceServiceDep",
    "get_caller_context",
    "get_caller_identity",
    "get_store",
    "get_token_codec",
]
