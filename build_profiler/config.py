"""Profiler configuration helpers."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings sourced from environment variables."""

    log_level: str = Field(default="INFO", description="Log level used by entrypoint scripts")
    report_logger: str = Field(
        default="build_profiler.report",
        description="Logger receiving the report lines when no sink is injected.",
    )
    negative_duration_policy: Literal["drop", "clamp"] = Field(
        default="drop",
        description="What to do with a negative duration caused by a clock anomaly.",
    )

    model_config = SettingsConfigDict(
        env_prefix="BUILD_PROFILER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
