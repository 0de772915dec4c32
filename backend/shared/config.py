"""
Centralized configuration for the Identity Bridge backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are grouped into nested sections and can be set
with a double-underscore delimiter (e.g., AUTH__CLAIMS__USE_DEFAULT=true).
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClaimsSettings(BaseModel):
    """Custom-claims behaviour for token verification."""

    use_default: bool = Field(
        default=False,
        description="Inject default claims when a user record has none",
    )


class AuthSettings(BaseModel):
    """Settings for the identity admin adapter."""

    claims: ClaimsSettings = Field(default_factory=ClaimsSettings)

    # What verify_token returns when local user reconciliation fails:
    # "empty" -> the empty VerificationResult, "propagate" -> the store's envelope
    reconciliation_failure: Literal["empty", "propagate"] = "empty"


class MessagingSettings(BaseModel):
    """Settings for the push notification adapter."""

    registration_token: Optional[str] = Field(
        None, description="Device registration token messages are sent to"
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Firebase
    service_account_key: str = ""  # JSON blob, takes precedence over everything else
    firebase_credentials: str = ""  # JSON blob, parsed by the credential chain
    firebase_credentials_path: str = "config/service-account.json"
    firebase_app_name: str = "identity-bridge"

    # Modules
    auth: AuthSettings = Field(default_factory=AuthSettings)
    messaging: MessagingSettings = Field(default_factory=MessagingSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
