from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: str = "DEV"
    API_VERSION: str = "0.1.0"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"
