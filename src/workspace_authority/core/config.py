from functools import lru_cache

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Workspace Authority"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True  # Set to False in production

    # Security
    log_user_emails: bool = False  # Set to False in production for GDPR compliance

    # Database
    database_url: str
    database_migrations_url: str | None = None
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full

    # Invitations
    invitation_secret: SecretStr | None = None  # HMAC key for invitation token hashes

    # Identity provider (bearer JWTs issued upstream)
    identity_jwt_secret: SecretStr
    identity_jwt_algorithm: str = "HS256"
    identity_jwt_audience: str | None = None

    # Workspaces
    default_workspace_currency: str = "AUD"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Email (Resend)
    resend_api_key: str | None = None  # If not set, emails are logged but not sent
    email_from: str = "noreply@example.com"
    email_send_timeout_seconds: int = 10  # Timeout for email API calls
    app_url: str = "http://localhost:3000"  # Frontend URL for invitation links

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @field_validator("invitation_secret")
    @classmethod
    def validate_invitation_secret(cls, v: SecretStr | None) -> SecretStr | None:
        if v is not None and len(v.get_secret_value()) < 32:
            raise ValueError(
                "INVITATION_SECRET must be at least 32 characters. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @model_validator(mode="after")
    def require_invitation_secret_in_production(self) -> "Settings":
        if self.is_production and self.invitation_secret is None:
            raise ValueError(
                "INVITATION_SECRET environment variable is not set. "
                "Set INVITATION_SECRET to a random secret string before running in production."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
