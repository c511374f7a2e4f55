"""HTTP middlewares."""

from src.workspace_authority.api.middlewares.request_context import request_context_middleware

__all__ = ["request_context_middleware"]
