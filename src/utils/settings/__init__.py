"""Process-wide settings, loaded once at startup."""

from dataclasses import dataclass

from src.utils.settings.app import AppSettings
from src.utils.settings.auth import AuthSettings
from src.utils.settings.cloud import CloudSettings


@dataclass(frozen=True)
class Settings:
    app: AppSettings
    cloud: CloudSettings
    auth: AuthSettings


def load_settings() -> Settings:
    """Read every settings group from the environment.

    Raises pydantic.ValidationError when a required value is missing, which
    stops the process before the server binds.
    """
    return Settings(app=AppSettings(), cloud=CloudSettings(), auth=AuthSettings())


__all__ = ["AppSettings", "AuthSettings", "CloudSettings", "Settings", "load_settings"]
