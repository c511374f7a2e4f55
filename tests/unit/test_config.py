"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from src.workspace_authority.core.config import Settings

pytestmark = pytest.mark.unit

BASE = {
    "database_url": "postgresql+asyncpg://localhost/test",
    "identity_jwt_secret": "identity-secret",
}


def test_production_without_invitation_secret_fails():
    with pytest.raises(ValidationError, match="INVITATION_SECRET"):
        Settings(_env_file=None, app_env="production", invitation_secret=None, **BASE)


def test_production_with_invitation_secret_loads():
    settings = Settings(
        _env_file=None, app_env="production", invitation_secret="s" * 32, **BASE
    )
    assert settings.is_production
    assert settings.invitation_secret.get_secret_value() == "s" * 32


def test_development_without_invitation_secret_loads():
    settings = Settings(_env_file=None, app_env="development", invitation_secret=None, **BASE)
    assert settings.invitation_secret is None


def test_short_invitation_secret_rejected():
    with pytest.raises(ValidationError, match="at least 32"):
        Settings(_env_file=None, invitation_secret="too-short", **BASE)


def test_cors_wildcard_rejected():
    with pytest.raises(ValidationError, match="wildcard"):
        Settings(_env_file=None, cors_origins=["*"], **BASE)
