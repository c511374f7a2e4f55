"""Per-request log context and audit metadata."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.workspace_authority.core.audit_context import (
    clear_request_metadata,
    client_ip,
    set_request_metadata,
)
from src.workspace_authority.core.logging import bind_request_context, clear_request_context


async def request_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind the correlation id and caller IP for the duration of the request.

    Both are cleared on the way out so nothing leaks into the next request
    served by the same task.
    """
    request_id = correlation_id.get()
    ip_address = client_ip(
        request.headers.get("x-forwarded-for"),
        request.client.host if request.client else None,
    )

    clear_request_context()
    clear_request_metadata()
    bind_request_context(request_id, ip_address)
    set_request_metadata(ip_address=ip_address, request_id=request_id)
    try:
        return await call_next(request)
    finally:
        clear_request_metadata()
        clear_request_context()
