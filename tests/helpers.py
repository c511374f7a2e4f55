"""Test helper functions for building caller credentials."""

from jose import jwt

from src.workspace_authority.core.config import get_settings


def identity_token(user_id: str, email: str | None = None, name: str | None = None) -> str:
    """Sign a bearer token the way the identity provider would."""
    settings = get_settings()
    claims: dict[str, str] = {"sub": user_id}
    if email:
        claims["email"] = email
    if name:
        claims["name"] = name
    return jwt.encode(
        claims,
        settings.identity_jwt_secret.get_secret_value(),
        algorithm=settings.identity_jwt_algorithm,
    )


def auth_headers(user_id: str, email: str | None = None) -> dict[str, str]:
    return {"Authorization": f"Bearer {identity_token(user_id, email)}"}
