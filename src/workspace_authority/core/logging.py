"""structlog setup and request/caller context binding."""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

_NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "asyncpg")


def setup_logging(debug: bool = False) -> None:
    """Configure structlog on top of stdlib logging.

    Console rendering with colors in debug mode, one JSON object per line
    otherwise.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None, client_ip: str | None = None) -> None:
    """Bind the correlation id (and caller IP, when known) to subsequent log calls."""
    context = {"request_id": request_id, "client_ip": client_ip}
    bind_contextvars(**{key: value for key, value in context.items() if value})


def bind_user_context(
    user_id: str,
    workspace_id: str | None = None,
    email: str | None = None,
    role: str | None = None,
) -> None:
    """Bind the caller and, once resolved, their active workspace and role.

    Email is only bound when settings.log_user_emails is True (GDPR compliance).
    """
    from src.workspace_authority.core.config import get_settings

    bind_contextvars(user_id=user_id)
    if workspace_id is not None:
        bind_contextvars(workspace_id=workspace_id)
    if role is not None:
        bind_contextvars(role=role)

    if email and get_settings().log_user_emails:
        bind_contextvars(user_email=email)


def clear_request_context() -> None:
    clear_contextvars()
