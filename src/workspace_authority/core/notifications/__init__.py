"""Notification utilities - email."""

from src.workspace_authority.core.notifications.email import (
    invitation_url,
    send_invitation_email,
)

__all__ = [
    "invitation_url",
    "send_invitation_email",
]
