"""Request metadata captured for the audit trail."""

from contextvars import ContextVar
from dataclasses import dataclass

_request_metadata: ContextVar["RequestMetadata | None"] = ContextVar(
    "request_metadata", default=None
)


@dataclass(frozen=True)
class RequestMetadata:
    ip_address: str | None = None
    request_id: str | None = None


def set_request_metadata(ip_address: str | None = None, request_id: str | None = None) -> None:
    _request_metadata.set(RequestMetadata(ip_address=ip_address, request_id=request_id))


def get_request_metadata() -> RequestMetadata | None:
    return _request_metadata.get()


def clear_request_metadata() -> None:
    _request_metadata.set(None)


def client_ip(forwarded_for: str | None, client_host: str | None) -> str | None:
    """First hop of X-Forwarded-For, falling back to the connection's host."""
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return client_host
