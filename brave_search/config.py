"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

WEB_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"
SUGGEST_URL = "https://api.search.brave.com/res/v1/suggest/search"
SPELLCHECK_URL = "https://api.search.brave.com/res/v1/spellcheck/search"


class ClientConfig(BaseModel):
    """Credential and endpoints used by a single ``SearchClient``."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    web_search_url: str = WEB_SEARCH_URL
    suggest_url: str = SUGGEST_URL
    spellcheck_url: str = SPELLCHECK_URL
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="None disables the timeout; a hung request then never settles.",
    )


class BraveSearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BRAVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr
    web_search_url: str = WEB_SEARCH_URL
    suggest_url: str = SUGGEST_URL
    spellcheck_url: str = SPELLCHECK_URL
    request_timeout_seconds: float | None = Field(default=None, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("request_timeout_seconds", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            api_key=self.api_key,
            web_search_url=self.web_search_url,
            suggest_url=self.suggest_url,
            spellcheck_url=self.spellcheck_url,
            request_timeout_seconds=self.request_timeout_seconds,
        )


@lru_cache
def get_settings() -> BraveSearchSettings:
    """Return cached settings instance."""

    return BraveSearchSettings()  # type: ignore[call-arg]


__all__ = [
    "BraveSearchSettings",
    "ClientConfig",
    "SPELLCHECK_URL",
    "SUGGEST_URL",
    "WEB_SEARCH_URL",
    "get_settings",
]
