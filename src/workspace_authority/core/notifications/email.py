"""Invitation emails sent through Resend."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from urllib.parse import quote

import resend

from src.workspace_authority.core.config import get_settings
from src.workspace_authority.core.logging import get_logger

logger = get_logger(__name__)

_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_BUTTON_STYLE = (
    "background-color: #2563eb; color: white; padding: 12px 24px; "
    "text-decoration: none; border-radius: 6px; display: inline-block; font-weight: 500;"
)


def invitation_url(token: str) -> str:
    """Frontend link that carries the raw token to the accept screen."""
    settings = get_settings()
    return f"{settings.app_url}/invite/accept?token={quote(token)}"


def send_invitation_email(to: str, token: str, workspace_name: str, role: str) -> bool:
    """Email an invitation link.

    The token is only ever placed in the link; it is never logged.

    Returns:
        True if the email was sent (or skipped for lack of an API key),
        False on error or timeout
    """
    settings = get_settings()

    if not settings.resend_api_key:
        logger.warning(
            "RESEND_API_KEY not set - invitation email not sent",
            email_type="invitation",
        )
        return True

    resend.api_key = settings.resend_api_key
    link = invitation_url(token)

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": f"You've been invited to join {workspace_name}",
                "html": _get_invitation_email_html(workspace_name, role, link),
            }
        )

    try:
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("Invitation email sent")
        return True
    except FuturesTimeoutError:
        logger.error("Email send timed out", timeout=settings.email_send_timeout_seconds)
        return False
    except Exception as e:
        logger.error("Failed to send invitation email", error=str(e))
        return False


def _get_invitation_email_html(workspace_name: str, role: str, link: str) -> str:
    safe_workspace_name = html.escape(workspace_name)
    safe_role = html.escape(role)
    safe_link = html.escape(link, quote=True)
    return f"""
<!DOCTYPE html>
<html>
<body style="{_BODY_STYLE}">
    <h1 style="color: #2563eb; margin-bottom: 24px;">You're invited</h1>
    <p>You have been invited to join <strong>{safe_workspace_name}</strong> as {safe_role}.</p>
    <p style="margin: 32px 0;">
        <a href="{safe_link}" style="{_BUTTON_STYLE}">Accept Invitation</a>
    </p>
    <p style="color: #666; font-size: 14px;">This invitation expires in 7 days.</p>
</body>
</html>
"""
