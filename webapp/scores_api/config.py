"""
Runtime settings for the NBA Scores API proxy.

All values come from environment variables and are read once, when the app
is created.

Environment Variables:
    HOST / PORT: listen address for `nba-scores-api` (default 127.0.0.1:3001)
    DEBUG: verbose logging (default: "false")
    CACHE: set to "false" to disable all caching (default: "true")
    LOG_TO_FILE: also log to LOG_DIR/scores_api.log (default: "true")
    LOG_DIR: log file directory (default: webapp/logs)
    NBA_CDN_BASE_URL / NBA_STATS_BASE_URL: upstream overrides
    SCOREBOARD_TODAY_TTL_SECONDS (10), SCOREBOARD_HISTORICAL_TTL_SECONDS (300),
    BOXSCORE_TTL_SECONDS (15), UPSTREAM_TIMEOUT_SECONDS (10)
    CORS_ORIGINS: comma-separated allowed origins (default: "*")
"""

from pathlib import Path
from typing import Annotated, Any, Mapping, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .constants import (
    BOXSCORE_TTL_SECONDS,
    DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    HISTORICAL_SCOREBOARD_TTL_SECONDS,
    NBA_CDN_BASE,
    NBA_STATS_BASE,
    TODAY_SCOREBOARD_TTL_SECONDS,
)
from .logging_config import DEFAULT_LOG_DIR


class Settings(BaseSettings):
    """Proxy settings; field names are used in code, aliases in the environment."""

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,
    )

    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=3001, ge=1, le=65535, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    cache_enabled: bool = Field(default=True, validation_alias="CACHE")
    log_to_file: bool = Field(default=True, validation_alias="LOG_TO_FILE")
    log_dir: Path = Field(default=DEFAULT_LOG_DIR, validation_alias="LOG_DIR")

    # upstreams
    cdn_base_url: str = Field(default=NBA_CDN_BASE, validation_alias="NBA_CDN_BASE_URL")
    stats_base_url: str = Field(default=NBA_STATS_BASE, validation_alias="NBA_STATS_BASE_URL")
    upstream_timeout_seconds: float = Field(
        default=DEFAULT_UPSTREAM_TIMEOUT_SECONDS, gt=0, validation_alias="UPSTREAM_TIMEOUT_SECONDS"
    )

    # cache TTLs
    today_ttl_seconds: float = Field(
        default=TODAY_SCOREBOARD_TTL_SECONDS, gt=0, validation_alias="SCOREBOARD_TODAY_TTL_SECONDS"
    )
    historical_ttl_seconds: float = Field(
        default=HISTORICAL_SCOREBOARD_TTL_SECONDS, gt=0, validation_alias="SCOREBOARD_HISTORICAL_TTL_SECONDS"
    )
    boxscore_ttl_seconds: float = Field(
        default=BOXSCORE_TTL_SECONDS, gt=0, validation_alias="BOXSCORE_TTL_SECONDS"
    )

    # "*" or "http://a, http://b"; NoDecode keeps the raw string away from JSON parsing
    cors_origins: Annotated[tuple[str, ...], NoDecode] = Field(default=("*",), validation_alias="CORS_ORIGINS")

    @field_validator("cdn_base_url", "stats_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [origin.strip() for origin in value.split(",")]
        if isinstance(value, (list, tuple)):
            value = tuple(origin for origin in value if origin)
            return value or ("*",)
        return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the process environment.

    An explicit mapping replaces the environment entirely (blank values count
    as unset), which keeps tests and scripts independent of the caller's shell.
    Invalid values raise pydantic's ValidationError, a ValueError.
    """
    if env is None:
        return Settings()
    return Settings.model_validate({name: value for name, value in env.items() if value.strip()})
