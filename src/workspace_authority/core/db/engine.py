"""Async engine for the SQL store adapter."""

import ssl
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.workspace_authority.core.config import Settings, get_settings

_engine: AsyncEngine | None = None

# ssl mode -> (check_hostname, verify_mode)
_SSL_MODES: dict[str, tuple[bool, ssl.VerifyMode]] = {
    "prefer": (False, ssl.CERT_NONE),
    "require": (False, ssl.CERT_NONE),
    "verify-ca": (False, ssl.CERT_REQUIRED),
    "verify-full": (True, ssl.CERT_REQUIRED),
}


def ssl_connect_args(ssl_mode: str) -> dict[str, Any]:
    """Translate a libpq-style sslmode into asyncpg connect args."""
    if ssl_mode == "disable":
        return {}
    try:
        check_hostname, verify_mode = _SSL_MODES[ssl_mode]
    except KeyError:
        raise ValueError(f"Unknown database ssl mode: {ssl_mode}") from None

    context = ssl.create_default_context()
    context.check_hostname = check_hostname
    context.verify_mode = verify_mode
    return {"ssl": context}


def build_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        connect_args=ssl_connect_args(settings.database_ssl_mode),
    )


def get_engine() -> AsyncEngine:
    """Process-wide engine, created on first use."""
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings())
    return _engine


async def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
