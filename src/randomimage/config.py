"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (RANDOMIMAGE__CACHE__TTL_MS=0)
  2. randomimage.yaml       (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CACHE_TTL_MS = 30_000


def _find_config_file() -> str | None:
    """Return the path of the first randomimage.yaml found, or None."""
    candidates = [
        Path("randomimage.yaml"),
        Path(platformdirs.user_config_dir("randomimage")) / "randomimage.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000


class CategorySettings(BaseModel):
    # Holds the <category>.txt files
    directory: str = "."
    # Served at / (index.html) and under /public
    public_dir: str = "public"


class CacheSettings(BaseModel):
    # <= 0 or non-finite disables both caches
    ttl_ms: float = DEFAULT_CACHE_TTL_MS

    @field_validator("ttl_ms", mode="before")
    @classmethod
    def coerce_ttl(cls, v: Any) -> float:
        if isinstance(v, bool):
            return 0.0
        try:
            return float(v)
        except (TypeError, ValueError):
            return 0.0


class CorsSettings(BaseModel):
    allow_origins: list[str] = ["*"]


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: RANDOMIMAGE__SERVER__PORT=9090
        env_prefix="RANDOMIMAGE__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    server: ServerSettings = ServerSettings()
    categories: CategorySettings = CategorySettings()
    cache: CacheSettings = CacheSettings()
    cors: CorsSettings = CorsSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
