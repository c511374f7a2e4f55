"""Access-control failures and the handlers that translate them to HTTP.

Services raise these; only the handlers below decide on status codes. An
integrity failure must never share a bucket with a permission failure: the
first pages an operator, the second is routine.
"""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.workspace_authority.core.logging import get_logger

logger = get_logger(__name__)


class WorkspaceAccessError(Exception):
    """Base class for access-control failures."""

    detail = "Access denied"


class Unauthenticated(WorkspaceAccessError):
    """No valid caller identity. The client should sign in again."""

    detail = "Not authenticated"


class NotAMember(WorkspaceAccessError):
    """Caller has no membership in the target workspace."""

    def __init__(self, workspace_id: str, user_id: str):
        super().__init__(f"User {user_id} is not a member of workspace {workspace_id}")
        self.workspace_id = workspace_id
        self.user_id = user_id


class InsufficientPermission(WorkspaceAccessError):
    """Caller is a member but their role is below the required level."""

    detail = "Insufficient permissions"

    def __init__(self, action: str, required_role: str, role: str):
        super().__init__(f"Insufficient permission: {action} requires {required_role}, caller is {role}")
        self.action = action
        self.required_role = required_role
        self.role = role


class MembershipIntegrityError(WorkspaceAccessError):
    """More than one membership exists for a (workspace, user) pair.

    The store's uniqueness guarantee has failed. Never recovered from.
    """

    detail = "Internal server error"

    def __init__(self, workspace_id: str, user_id: str, count: int):
        super().__init__(
            f"Data integrity error: {count} memberships for user {user_id} "
            f"in workspace {workspace_id}"
        )
        self.workspace_id = workspace_id
        self.user_id = user_id
        self.count = count


class InvalidOrExpiredInvitation(WorkspaceAccessError):
    """Unknown, already accepted, or expired invitation token.

    The three cases are deliberately indistinguishable.
    """

    detail = "Invalid or expired invitation"


class InvitationEmailMismatch(WorkspaceAccessError):
    """The accepting caller's email differs from the invited address."""

    detail = "This invitation was sent to a different email address"


def _error_response(status_code: int, detail: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "request_id": correlation_id.get(),
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail, exc.headers)

    @app.exception_handler(Unauthenticated)
    async def unauthenticated_handler(request: Request, exc: Unauthenticated) -> JSONResponse:
        logger.info("Unauthenticated request", path=request.url.path)
        return _error_response(
            status.HTTP_401_UNAUTHORIZED,
            exc.detail,
            {"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotAMember)
    async def not_a_member_handler(request: Request, exc: NotAMember) -> JSONResponse:
        logger.info(
            "Workspace access denied",
            workspace_id=exc.workspace_id,
            path=request.url.path,
        )
        return _error_response(status.HTTP_403_FORBIDDEN, exc.detail)

    @app.exception_handler(InsufficientPermission)
    async def insufficient_permission_handler(
        request: Request, exc: InsufficientPermission
    ) -> JSONResponse:
        logger.warning(
            "Insufficient permission",
            action=exc.action,
            required_role=exc.required_role,
            role=exc.role,
            path=request.url.path,
        )
        return _error_response(status.HTTP_403_FORBIDDEN, exc.detail)

    @app.exception_handler(MembershipIntegrityError)
    async def integrity_error_handler(
        request: Request, exc: MembershipIntegrityError
    ) -> JSONResponse:
        logger.critical(
            "Refusing request after membership integrity failure",
            workspace_id=exc.workspace_id,
            user_id=exc.user_id,
            membership_count=exc.count,
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.detail)

    @app.exception_handler(InvalidOrExpiredInvitation)
    async def invalid_invitation_handler(
        request: Request, exc: InvalidOrExpiredInvitation
    ) -> JSONResponse:
        logger.info("Invalid or expired invitation token presented", path=request.url.path)
        return _error_response(status.HTTP_404_NOT_FOUND, exc.detail)

    @app.exception_handler(InvitationEmailMismatch)
    async def invitation_email_mismatch_handler(
        request: Request, exc: InvitationEmailMismatch
    ) -> JSONResponse:
        logger.info("Invitation email mismatch", path=request.url.path)
        return _error_response(status.HTTP_403_FORBIDDEN, exc.detail)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
