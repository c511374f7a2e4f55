"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import WorkspaceFactory, WorkspaceMemberFactory, ...
"""

from tests.factories.base import BaseFactory, new_id, utc_now
from tests.factories.invitation import WorkspaceInvitationFactory
from tests.factories.workspace import (
    UserPreferenceFactory,
    WorkspaceFactory,
    WorkspaceMemberFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    "new_id",
    "utc_now",
    # Models
    "UserPreferenceFactory",
    "WorkspaceFactory",
    "WorkspaceInvitationFactory",
    "WorkspaceMemberFactory",
]
