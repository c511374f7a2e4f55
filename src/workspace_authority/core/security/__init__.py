"""Security utilities - tokens, permissions and caller identity.

Re-exports all security-related functions for convenience.
"""

from src.workspace_authority.core.security.identity import (
    CallerIdentity,
    decode_identity_token,
)
from src.workspace_authority.core.security.permissions import (
    MINIMUM_ROLE,
    ROLE_ORDINALS,
    has_permission,
    required_role,
    role_ordinal,
)
from src.workspace_authority.core.security.tokens import TokenCodec

__all__ = [
    # Identity
    "CallerIdentity",
    "decode_identity_token",
    # Permissions
    "MINIMUM_ROLE",
    "ROLE_ORDINALS",
    "has_permission",
    "required_role",
    "role_ordinal",
    # Tokens
    "TokenCodec",
]
