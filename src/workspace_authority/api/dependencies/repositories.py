"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.workspace_authority.api.dependencies.store import Store
from src.workspace_authority.repositories import (
    AuditLogRepository,
    InvitationRepository,
    MembershipRepository,
    PreferenceRepository,
    WorkspaceRepository,
)


def get_workspace_repository(store: Store) -> WorkspaceRepository:
    return WorkspaceRepository(store)


def get_membership_repository(store: Store) -> MembershipRepository:
    return MembershipRepository(store)


def get_invitation_repository(store: Store) -> InvitationRepository:
    return InvitationRepository(store)


def get_preference_repository(store: Store) -> PreferenceRepository:
    return PreferenceRepository(store)


def get_audit_log_repository(store: Store) -> AuditLogRepository:
    return AuditLogRepository(store)


WorkspaceRepo = Annotated[WorkspaceRepository, Depends(get_workspace_repository)]
MembershipRepo = Annotated[MembershipRepository, Depends(get_membership_repository)]
InvitationRepo = Annotated[InvitationRepository, Depends(get_invitation_repository)]
PreferenceRepo = Annotated[PreferenceRepository, Depends(get_preference_repository)]
AuditLogRepo = Annotated[AuditLogRepository, Depends(get_audit_log_repository)]
