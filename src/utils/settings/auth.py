from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Shared with the game server, sent in the x-game-auth header
    GAME_SHARED_SECRET: SecretStr

    @field_validator("GAME_SHARED_SECRET")
    @classmethod
    def _require_secret(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("GAME_SHARED_SECRET must not be empty")
        return value
