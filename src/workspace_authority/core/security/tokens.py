"""Invitation token generation and keyed hashing."""

import hashlib
import hmac
import secrets

from src.workspace_authority.core.config import Settings
from src.workspace_authority.core.logging import get_logger

logger = get_logger(__name__)

TOKEN_BYTES = 32


class TokenCodec:
    """Generates invitation tokens and their HMAC-SHA256 digests.

    Only the digest is ever persisted. The same key must be used for hashing
    at creation and at verification, so the codec is built once per process
    from settings and injected wherever tokens are handled.
    """

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("Token codec requires a non-empty secret")
        self._key = secret.encode()

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        """Build the codec from INVITATION_SECRET.

        Production settings refuse to load without the secret. Elsewhere a
        random per-process key is used, so tokens do not survive a restart.
        """
        if settings.invitation_secret is not None:
            return cls(settings.invitation_secret.get_secret_value())

        logger.warning(
            "INVITATION_SECRET not set - using an ephemeral key; "
            "invitation links will stop working after restart",
            app_env=settings.app_env,
        )
        return cls(secrets.token_hex(TOKEN_BYTES))

    @staticmethod
    def generate_token() -> str:
        """Return 32 random bytes as 64 lowercase hex characters."""
        return secrets.token_hex(TOKEN_BYTES)

    def hash(self, token: str) -> str:
        """Keyed one-way digest of a token, hex encoded."""
        return hmac.new(self._key, token.encode(), hashlib.sha256).hexdigest()
