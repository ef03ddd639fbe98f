"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lexicard import constants


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "lexicard API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Thesaurus (API Ninjas)
    NINJAS_API_KEY: str | None = None
    THESAURUS_BASE_URL: str = "https://api.api-ninjas.com"
    THESAURUS_TIMEOUT_SECONDS: float = 10.0
    MAX_SYNONYMS: int = constants.MAX_SYNONYMS

    # Translation
    GOOGLE_TRANSLATE_URL: str = "https://translate.googleapis.com/translate_a/single"
    MYMEMORY_URL: str = "https://api.mymemory.translated.net/get"
    TRANSLATION_TIMEOUT_SECONDS: float = 10.0
    BULK_TRANSLATION_DELAY_SECONDS: float = 0.2
    DEFAULT_SOURCE_LANG: str = "en"
    DEFAULT_TARGET_LANG: str = "ru"

    # Durable cache
    REDIS_URL: str | None = None
    SYNONYM_CACHE_TTL_SECONDS: int = constants.SYNONYM_CACHE_TTL_SECONDS

    @computed_field  # type: ignore[prop-decorator]
    @property
    def redis_enabled(self) -> bool:
        """Whether the durable Redis cache tier is configured."""
        return bool(self.REDIS_URL)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def thesaurus_enabled(self) -> bool:
        """Whether synonym lookup has credentials."""
        return bool(self.NINJAS_API_KEY)

    @field_validator("NINJAS_API_KEY", "REDIS_URL", mode="after")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        """Treat blank env values as unset."""
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("DEFAULT_SOURCE_LANG", "DEFAULT_TARGET_LANG", mode="after")
    @classmethod
    def lowercase_language(cls, value: str) -> str:
        """Language codes are compared lowercase."""
        return value.strip().lower()


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # JSON output in production, coloured console output otherwise
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
