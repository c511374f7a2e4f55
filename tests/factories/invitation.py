"""Invitation factory."""

from datetime import timedelta

from polyfactory import Use

from src.workspace_authority.models import WorkspaceInvitation, WorkspaceRole
from tests.factories.base import BaseFactory, new_id, utc_now


class WorkspaceInvitationFactory(BaseFactory):
    __model__ = WorkspaceInvitation

    id = Use(new_id)
    workspace_id = Use(new_id)
    email = Use(lambda: f"invitee-{new_id()[-8:]}@example.com")
    role = WorkspaceRole.VIEWER.value
    token_hash = Use(lambda: new_id() + new_id())
    created_at = Use(utc_now)
    expires_at = Use(lambda: utc_now() + timedelta(days=7))
    created_by_id = Use(lambda: f"u-{new_id()[-8:]}")
    accepted_at = None

    @classmethod
    def expired(cls, **kwargs):
        created = utc_now() - timedelta(days=8)
        return cls.build(created_at=created, expires_at=created + timedelta(days=7), **kwargs)

    @classmethod
    def accepted(cls, **kwargs):
        return cls.build(accepted_at=utc_now(), **kwargs)
