"""Application settings loaded from environment variables."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Shared by uvicorn and the app's logging setup
    log_level: str = "info"

    @field_validator("port", mode="before")
    @classmethod
    def _fallback_port(cls, value):
        """Non-integer PORT values fall back to the default instead of failing startup."""
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid PORT {value!r}, using {DEFAULT_PORT}")
            return DEFAULT_PORT


settings = Settings()
