"""Caller identity and context dependencies."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.workspace_authority.api.dependencies.services import ContextServiceDep
from src.workspace_authority.core.config import get_settings
from src.workspace_authority.core.exceptions import Unauthenticated
from src.workspace_authority.core.logging import bind_user_context
from src.workspace_authority.core.security import CallerIdentity, decode_identity_token
from src.workspace_authority.services import CallerContext, NeedsOnboarding

ONBOARDING_REQUIRED = "onboarding_required"


async def get_caller_identity(
    authorization: Annotated[str | None, Header()] = None,
) -> CallerIdentity:
    """Verify the identity provider's bearer token.

    Raises:
        Unauthenticated: If the header is missing or the token does not verify
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthenticated()

    identity = decode_identity_token(authorization[7:], get_settings())
    if identity is None:
        raise Unauthenticated()

    bind_user_context(identity.user_id, email=identity.email)
    return identity


Identity = Annotated[CallerIdentity, Depends(get_caller_identity)]


async def get_caller_context(
    identity: Identity,
    context_service: ContextServiceDep,
) -> CallerContext:
    """Resolve the caller's active workspace, or 409 if they need onboarding."""
    resolved = await context_service.resolve(identity)

    if isinstance(resolved, NeedsOnboarding):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=ONBOARDING_REQUIRED,
        )

    bind_user_context(
        resolved.user_id, workspace_id=resolved.workspace_id, role=resolved.role.value
    )
    return resolved


Context = Annotated[CallerContext, Depends(get_caller_context)]
