# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./support_tickets.db")
    APP_NAME: str = "Support Ticket API"
    APP_DESC: str = "Support tickets and their comments over REST"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    # Comma-separated, empty means allow all
    CORS_ORIGINS: str | None = None

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
