"""Tests for structured logging context."""

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.workspace_authority.core.config import get_settings
from src.workspace_authority.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )
    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def test_bind_request_context(capturing_logger):
    bind_request_context("test-request-123")
    structlog.get_logger().info("test message")

    assert capturing_logger.calls[0].kwargs["request_id"] == "test-request-123"


def test_bind_request_context_with_none(capturing_logger):
    bind_request_context(None)
    structlog.get_logger().info("test message")

    assert "request_id" not in capturing_logger.calls[0].kwargs


def test_bind_request_context_with_client_ip(capturing_logger):
    bind_request_context("req-1", "203.0.113.7")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["request_id"] == "req-1"
    assert kwargs["client_ip"] == "203.0.113.7"


def test_bind_user_context_binds_workspace_and_role(capturing_logger):
    bind_user_context("u-alice", workspace_id="w1", role="admin")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_id"] == "u-alice"
    assert kwargs["workspace_id"] == "w1"
    assert kwargs["role"] == "admin"


def test_bind_user_context_without_workspace(capturing_logger):
    bind_user_context("u-bob")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_id"] == "u-bob"
    assert "workspace_id" not in kwargs
    assert "role" not in kwargs


def test_email_not_bound_by_default(capturing_logger):
    assert get_settings().log_user_emails is False
    bind_user_context("u-alice", email="alice@example.com")
    structlog.get_logger().info("test message")

    assert "user_email" not in capturing_logger.calls[0].kwargs


def test_email_bound_when_enabled(capturing_logger, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(get_settings(), "log_user_emails", True)
    bind_user_context("u-alice", email="alice@example.com")
    structlog.get_logger().info("test message")

    assert capturing_logger.calls[0].kwargs["user_email"] == "alice@example.com"
