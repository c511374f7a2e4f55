from fastapi import APIRouter

from src.workspace_authority.api.v1 import audit, invitations, members, workspaces

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(workspaces.router)
api_router.include_router(members.router)
api_router.include_router(invitations.workspace_router)
api_router.include_router(invitations.router)
api_router.include_router(audit.router)
