"""Backfill the legacy "default" workspace.

Links existing users to the workspace that pre-workspace data was written
under, so their data stays reachable. Safe to run repeatedly.

Usage:
    python -m src.workspace_authority.cli.backfill_default_workspace USER_ID [USER_ID ...]

The first user becomes owner, the rest admin. Users who already have a
membership in the workspace are left untouched.
"""

import argparse
import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field

from src.workspace_authority.core.config import get_settings
from src.workspace_authority.core.db import dispose_engine, get_session
from src.workspace_authority.core.logging import get_logger, setup_logging
from src.workspace_authority.models import Workspace, WorkspaceMember, WorkspaceRole
from src.workspace_authority.repositories import MembershipRepository, WorkspaceRepository
from src.workspace_authority.store import DocumentStore, SQLStore

logger = get_logger(__name__)

DEFAULT_WORKSPACE_ID = "default"
DEFAULT_WORKSPACE_NAME = "Family Finances"
SYSTEM_OWNER_ID = "system"


@dataclass
class BackfillResult:
    workspace_created: bool = False
    added: dict[str, str] = field(default_factory=dict)  # user_id -> role
    skipped: list[str] = field(default_factory=list)


async def backfill_default_workspace(
    store: DocumentStore,
    user_ids: Sequence[str],
    currency: str = "AUD",
) -> BackfillResult:
    """Ensure the default workspace exists and every given user is a member."""
    result = BackfillResult()
    workspace_repo = WorkspaceRepository(store)
    membership_repo = MembershipRepository(store)

    if await workspace_repo.get_by_id(DEFAULT_WORKSPACE_ID) is None:
        await workspace_repo.add(
            Workspace(
                id=DEFAULT_WORKSPACE_ID,
                name=DEFAULT_WORKSPACE_NAME,
                currency=currency,
                owner_id=SYSTEM_OWNER_ID,
            )
        )
        result.workspace_created = True
        logger.info("Created default workspace", workspace_id=DEFAULT_WORKSPACE_ID)
    else:
        logger.info("Default workspace already exists", workspace_id=DEFAULT_WORKSPACE_ID)

    for index, user_id in enumerate(user_ids):
        if await membership_repo.membership_exists(DEFAULT_WORKSPACE_ID, user_id):
            result.skipped.append(user_id)
            logger.info("Already a member", user_id=user_id)
            continue

        role = WorkspaceRole.OWNER if index == 0 else WorkspaceRole.ADMIN
        await membership_repo.add(
            WorkspaceMember(
                id=f"member_{user_id}",
                workspace_id=DEFAULT_WORKSPACE_ID,
                user_id=user_id,
                role=role.value,
            )
        )
        result.added[user_id] = role.value
        logger.info("Added member", user_id=user_id, role=role.value)

    return result


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Link existing users to the legacy "default" workspace'
    )
    parser.add_argument(
        "user_ids",
        nargs="+",
        metavar="USER_ID",
        help="Identity-provider user ids, first one becomes owner",
    )
    return parser.parse_args(argv)


async def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.debug)

    try:
        async with get_session() as session:
            result = await backfill_default_workspace(
                SQLStore(session),
                args.user_ids,
                currency=settings.default_workspace_currency,
            )
    finally:
        await dispose_engine()

    logger.info(
        "Backfill complete",
        workspace_created=result.workspace_created,
        added=len(result.added),
        skipped=len(result.skipped),
    )


if __name__ == "__main__":
    asyncio.run(main())
