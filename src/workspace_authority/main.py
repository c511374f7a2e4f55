from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.workspace_authority.api.middlewares import request_context_middleware
from src.workspace_authority.api.v1.router import api_router
from src.workspace_authority.core.config import get_settings
from src.workspace_authority.core.db import dispose_engine, get_session
from src.workspace_authority.core.exceptions import setup_exception_handlers
from src.workspace_authority.core.logging import get_logger, setup_logging
from src.workspace_authority.core.security import TokenCodec

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", app_env=settings.app_env)

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "workspaces", "description": "Workspace creation, listing and switching"},
    {"name": "members", "description": "Workspace membership administration"},
    {"name": "invitations", "description": "Invitation issue, verification and acceptance"},
    {"name": "audit", "description": "Audit trail of membership-affecting actions"},
]


def create_app() -> FastAPI:
    # Fails fast on invalid settings, e.g. production without INVITATION_SECRET
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Workspace membership and invitation authority",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    app.state.token_codec = TokenCodec.from_settings(settings)

    setup_exception_handlers(app)

    app.middleware("http")(request_context_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    # Outermost, so the correlation id is set before any other middleware runs
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(api_router)

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check with database validation."""
        health_status = {"status": "healthy", "database": "unknown"}
        try:
            async with get_session() as session:
                await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            health_status["database"] = f"unhealthy: {str(e)}"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)

    return app


app = create_app()
