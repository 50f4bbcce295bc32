from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

DEFAULT_BASE_URL = "https://www.myedenred.pt/edenred-customer/api"
DEFAULT_CARD_ID = "537781"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    edenred_user: str = Field(default="", alias="EDENRED_USER")
    edenred_password: str = Field(default="", alias="EDENRED_PASSWORD")

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="EDENRED_BASE_URL")
    card_id: str = Field(default=DEFAULT_CARD_ID, alias="EDENRED_CARD_ID")

    # dumps raw response bodies at DEBUG level
    debug: bool = Field(default=False, alias="EDENRED_DEBUG")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def validate_required(self) -> None:
        if not self.edenred_user or not self.edenred_password:
            raise ConfigError("EDENRED_USER or EDENRED_PASSWORD not set")


@lru_cache
def load_settings() -> Settings:
    try:
        settings = Settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
    settings.validate_required()
    return settings
