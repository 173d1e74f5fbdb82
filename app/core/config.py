"""
Application Configuration

Uses Pydantic Settings for environment variable management with validation.
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TokenConfig(BaseModel):
    """
    Immutable JWT configuration handed to the token service.

    Attributes:
        secret_key: Default signing secret.
        algorithm: JWS algorithm used for signing and verification.
        access_expire_minutes: Lifetime of access tokens.
        refresh_expire_days: Lifetime of refresh tokens.
        reset_password_expire_minutes: Lifetime of password reset tokens.
        verify_email_expire_minutes: Lifetime of email verification tokens.
    """

    model_config = ConfigDict(frozen=True)

    secret_key: str = Field(..., min_length=1)
    algorithm: str = "HS256"
    access_expire_minutes: int = Field(30, gt=0)
    refresh_expire_days: int = Field(30, gt=0)
    reset_password_expire_minutes: int = Field(10, gt=0)
    verify_email_expire_minutes: int = Field(10, gt=0)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(30, gt=0)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(30, gt=0)
    RESET_PASSWORD_TOKEN_EXPIRE_MINUTES: int = Field(10, gt=0)
    VERIFY_EMAIL_TOKEN_EXPIRE_MINUTES: int = Field(10, gt=0)

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def token_config(self) -> TokenConfig:
        """Build the token service configuration from these settings."""
        return TokenConfig(
            secret_key=self.SECRET_KEY,
            algorithm=self.ALGORITHM,
            access_expire_minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES,
            refresh_expire_days=self.REFRESH_TOKEN_EXPIRE_DAYS,
            reset_password_expire_minutes=self.RESET_PASSWORD_TOKEN_EXPIRE_MINUTES,
            verify_email_expire_minutes=self.VERIFY_EMAIL_TOKEN_EXPIRE_MINUTES,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are only loaded once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
