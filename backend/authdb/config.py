"""
Provisioner configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Provisioner settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB (the URI must carry admin credentials)
    mongodb_uri: str = Field(default="mongodb://mongodb:27017")
    server_selection_timeout_ms: int = Field(default=10000)
    auth_db_name: str = Field(default="selco_auth")

    # Application credential
    app_db_user: str = Field(default="selco_auth_user")
    app_db_password: str = Field(default="selco_auth_password")

    # Seed admin
    admin_email: str = Field(default="admin@selco.com.br")
    admin_password: Optional[str] = Field(default=None)
    admin_password_hash: Optional[str] = Field(default=None)

    # Collection validation
    validation_level: Literal["strict", "moderate"] = Field(default="strict")
    validation_action: Literal["error", "warn"] = Field(default="error")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
