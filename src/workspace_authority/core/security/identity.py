"""Caller identity as asserted by the upstream identity provider."""

from dataclasses import dataclass
from typing import Any

from jose import JWTError, jwt

from src.workspace_authority.core.config import Settings


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated user as supplied by the identity layer.

    Attributes:
        user_id: Stable opaque user id (the token subject)
        email: Profile email, if the provider includes it
        name: Display name, if the provider includes it
    """

    user_id: str
    email: str | None = None
    name: str | None = None


def decode_identity_token(token: str, settings: Settings) -> CallerIdentity | None:
    """Decode and validate an identity JWT. Returns None on any error."""
    options: dict[str, Any] = {"verify_aud": settings.identity_jwt_audience is not None}
    try:
        payload = jwt.decode(
            token,
            settings.identity_jwt_secret.get_secret_value(),
            algorithms=[settings.identity_jwt_algorithm],
            audience=settings.identity_jwt_audience,
            options=options,
        )
    except JWTError:
        return None

    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        return None

    return CallerIdentity(
        user_id=user_id,
        email=payload.get("email"),
        name=payload.get("name"),
    )
