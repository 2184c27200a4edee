"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT_URL = "http://localhost:8080/compiler/plainText"
DEFAULT_QUERY = "SELECT * FROM User WHERE id = 10"


class QuerypadSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="QUERYPAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    endpoint_url: AnyHttpUrl = Field(
        default=DEFAULT_ENDPOINT_URL,
        description="Query-execution endpoint receiving plain-text queries.",
    )
    request_timeout_seconds: float = Field(default=30.0, gt=0, le=600)
    initial_query: str = DEFAULT_QUERY
    default_language: str = "en"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def endpoint(self) -> str:
        return str(self.endpoint_url)


@lru_cache
def get_settings() -> QuerypadSettings:
    """Return cached settings instance."""

    return QuerypadSettings()


__all__ = [
    "DEFAULT_ENDPOINT_URL",
    "DEFAULT_QUERY",
    "QuerypadSettings",
    "get_settings",
]
