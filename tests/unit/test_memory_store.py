"""Tests for the in-memory document store."""

from datetime import timedelta

import pytest

from src.workspace_authority.models import Workspace, WorkspaceMember
from src.workspace_authority.store import ConstraintViolationError, InMemoryStore, eq, gt, is_null
from tests.factories import (
    WorkspaceFactory,
    WorkspaceInvitationFactory,
    WorkspaceMemberFactory,
    utc_now,
)

pytestmark = pytest.mark.unit


async def test_create_and_get_round_trip(store: InMemoryStore):
    workspace = WorkspaceFactory.build(name="Household")
    await store.create_document(workspace)

    fetched = await store.get_document(Workspace, workspace.id)
    assert fetched is not None
    assert fetched.name == "Household"


async def test_get_missing_returns_none(store: InMemoryStore):
    assert await store.get_document(Workspace, "nope") is None


async def test_duplicate_id_rejected(store: InMemoryStore):
    workspace = WorkspaceFactory.build()
    await store.create_document(workspace)
    with pytest.raises(ConstraintViolationError):
        await store.create_document(WorkspaceFactory.build(id=workspace.id))


async def test_unique_index_enforced(store: InMemoryStore):
    await store.create_document(WorkspaceMemberFactory.build(workspace_id="w1", user_id="u1"))
    with pytest.raises(ConstraintViolationError):
        await store.create_document(WorkspaceMemberFactory.build(workspace_id="w1", user_id="u1"))


async def test_seed_bypasses_constraints(store: InMemoryStore):
    store.seed(
        WorkspaceMemberFactory.build(workspace_id="w1", user_id="u1"),
        WorkspaceMemberFactory.build(workspace_id="w1", user_id="u1"),
    )
    assert store.count(WorkspaceMember) == 2


async def test_filters(store: InMemoryStore):
    now = utc_now()
    pending = WorkspaceInvitationFactory.build(workspace_id="w1")
    accepted = WorkspaceInvitationFactory.accepted(workspace_id="w1")
    expired = WorkspaceInvitationFactory.expired(workspace_id="w1")
    other = WorkspaceInvitationFactory.build(workspace_id="w2")
    for invitation in (pending, accepted, expired, other):
        await store.create_document(invitation)

    results = await store.list_documents(
        type(pending),
        [eq("workspace_id", "w1"), is_null("accepted_at"), gt("expires_at", now)],
    )
    assert [r.id for r in results] == [pending.id]


async def test_update_and_delete(store: InMemoryStore):
    workspace = WorkspaceFactory.build()
    await store.create_document(workspace)

    updated = await store.update_document(Workspace, workspace.id, {"name": "Renamed"})
    assert updated is not None and updated.name == "Renamed"
    assert await store.update_document(Workspace, "missing", {"name": "x"}) is None

    assert await store.delete_document(Workspace, workspace.id) is True
    assert await store.delete_document(Workspace, workspace.id) is False


async def test_returned_entities_are_detached(store: InMemoryStore):
    workspace = WorkspaceFactory.build(name="Original")
    await store.create_document(workspace)

    fetched = await store.get_document(Workspace, workspace.id)
    fetched.name = "Mutated"

    again = await store.get_document(Workspace, workspace.id)
    assert again.name == "Original"


async def test_paginate_newest_first(store: InMemoryStore):
    base = utc_now()
    members = [
        WorkspaceMemberFactory.build(workspace_id="w1", joined_at=base + timedelta(minutes=i))
        for i in range(5)
    ]
    for member in members:
        await store.create_document(member)

    page, cursor, has_more = await store.paginate(
        WorkspaceMember, [eq("workspace_id", "w1")], None, 2, cursor_field="joined_at"
    )
    assert [m.id for m in page] == [members[4].id, members[3].id]
    assert has_more is True

    page, cursor, has_more = await store.paginate(
        WorkspaceMember, [eq("workspace_id", "w1")], cursor, 2, cursor_field="joined_at"
    )
    assert [m.id for m in page] == [members[2].id, members[1].id]

    page, cursor, has_more = await store.paginate(
        WorkspaceMember, [eq("workspace_id", "w1")], cursor, 2, cursor_field="joined_at"
    )
    assert [m.id for m in page] == [members[0].id]
    assert has_more is False
    assert cursor is None
