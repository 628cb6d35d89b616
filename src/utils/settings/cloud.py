"""Roblox Open Cloud settings configuration."""

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CloudSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    ROBLOX_API_KEY: SecretStr
    CLOUD_BASE_URL: str = "https://apis.roblox.com/cloud/v2"
    CLOUD_TIMEOUT_SECONDS: float = 30

    # Upstream page sizes; roles are never paginated past the first page
    ROLES_PAGE_SIZE: int = 100
    MEMBERSHIPS_PAGE_SIZE: int = 200
    MEMBERSHIP_MAX_PAGES: int = 1000

    @field_validator("ROBLOX_API_KEY")
    @classmethod
    def _require_api_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("ROBLOX_API_KEY must not be empty")
        return value

    @field_validator("CLOUD_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
