"""Tests for ContextService.resolve."""

import asyncio

import pytest

from src.workspace_authority.core.exceptions import MembershipIntegrityError, NotAMember
from src.workspace_authority.core.security import CallerIdentity
from src.workspace_authority.models import UserPreference, WorkspaceRole
from src.workspace_authority.repositories import MembershipRepository, PreferenceRepository
from src.workspace_authority.services import CallerContext, ContextService, NeedsOnboarding
from src.workspace_authority.store import ConstraintViolationError, InMemoryStore
from tests.factories import UserPreferenceFactory, WorkspaceMemberFactory

pytestmark = pytest.mark.unit

ALICE = CallerIdentity(user_id="u-alice", email="alice@example.com", name="Alice")


async def test_preference_wins(store: InMemoryStore, context_service: ContextService):
    await store.create_document(WorkspaceMemberFactory.owner(workspace_id="w1", user_id="u-alice"))
    await store.create_document(WorkspaceMemberFactory.editor(workspace_id="w2", user_id="u-alice"))
    await store.create_document(UserPreferenceFactory.build(id="u-alice", active_workspace_id="w2"))

    context = await context_service.resolve(ALICE)

    assert context == CallerContext(
        user_id="u-alice",
        workspace_id="w2",
        role=WorkspaceRole.EDITOR,
        email="alice@example.com",
        name="Alice",
    )


async def test_adopts_a_membership_and_persists_it(
    store: InMemoryStore,
    context_service: ContextService,
    preference_repo: PreferenceRepository,
):
    await store.create_document(WorkspaceMemberFactory.admin(workspace_id="w1", user_id="u-alice"))

    context = await context_service.resolve(ALICE)

    assert isinstance(context, CallerContext)
    assert context.workspace_id == "w1"
    assert context.role == WorkspaceRole.ADMIN
    assert await preference_repo.get_active_workspace_id("u-alice") == "w1"


async def test_no_workspace_needs_onboarding(context_service: ContextService):
    assert await context_service.resolve(ALICE) == NeedsOnboarding(user_id="u-alice")


async def test_stale_preference_is_not_a_member(
    store: InMemoryStore, context_service: ContextService
):
    await store.create_document(WorkspaceMemberFactory.owner(workspace_id="w1", user_id="u-alice"))
    await store.create_document(
        UserPreferenceFactory.build(id="u-alice", active_workspace_id="w-gone")
    )

    with pytest.raises(NotAMember):
        await context_service.resolve(ALICE)


async def test_duplicate_membership_is_integrity_error(
    store: InMemoryStore, context_service: ContextService
):
    store.seed(
        WorkspaceMemberFactory.owner(workspace_id="w1", user_id="u-alice"),
        WorkspaceMemberFactory.build(workspace_id="w1", user_id="u-alice"),
        UserPreferenceFactory.build(id="u-alice", active_workspace_id="w1"),
    )

    with pytest.raises(MembershipIntegrityError):
        await context_service.resolve(ALICE)


class InterleavingStore(InMemoryStore):
    """Yields to the event loop after every update so concurrent callers interleave."""

    async def update_document(self, model, id, values):
        result = await super().update_document(model, id, values)
        await asyncio.sleep(0)
        return result


async def test_concurrent_first_login_resolves_both_requests():
    store = InterleavingStore()
    await store.create_document(WorkspaceMemberFactory.owner(workspace_id="w1", user_id="u-alice"))
    service = ContextService(MembershipRepository(store), PreferenceRepository(store))

    first, second = await asyncio.gather(service.resolve(ALICE), service.resolve(ALICE))

    assert isinstance(first, CallerContext)
    assert isinstance(second, CallerContext)
    assert first.workspace_id == second.workspace_id == "w1"
    assert await PreferenceRepository(store).get_active_workspace_id("u-alice") == "w1"


class LosingInsertStore(InMemoryStore):
    """Another writer inserts the preference just before our insert lands."""

    async def create_document(self, entity):
        if isinstance(entity, UserPreference) and await self.get_document(
            UserPreference, entity.id
        ) is None:
            self.seed(UserPreference(id=entity.id, active_workspace_id="w-other"))
        return await super().create_document(entity)


async def test_set_active_workspace_updates_after_lost_insert():
    store = LosingInsertStore()
    repo = PreferenceRepository(store)

    preference = await repo.set_active_workspace_id("u-alice", "w1")

    assert preference.active_workspace_id == "w1"
    assert await repo.get_active_workspace_id("u-alice") == "w1"
    assert store.count(UserPreference) == 1


class PreferenceVanishesStore(InMemoryStore):
    """Insert is rejected but no row exists to update afterwards."""

    async def create_document(self, entity):
        if isinstance(entity, UserPreference):
            raise ConstraintViolationError("rejected")
        return await super().create_document(entity)


async def test_set_active_workspace_reraises_when_nothing_to_update():
    repo = PreferenceRepository(PreferenceVanishesStore())

    with pytest.raises(ConstraintViolationError):
        await repo.set_active_workspace_id("u-alice", "w1")
