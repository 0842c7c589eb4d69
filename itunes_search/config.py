"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from itunes_search.domain.models import ResultType

DEFAULT_SEARCH_URL = "https://itunes.apple.com/search"


class SearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ITUNES_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    base_url: str = Field(
        default=DEFAULT_SEARCH_URL,
        description="Search endpoint; any query string it carries is replaced per request.",
    )
    default_result_type: ResultType = ResultType.MUSIC
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> SearchSettings:
    """Return cached settings instance."""

    return SearchSettings()


__all__ = ["DEFAULT_SEARCH_URL", "SearchSettings", "get_settings"]
