"""Configuration settings for the playlist link service."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from playlist_link.core.constants import (
    DEFAULT_SEARCH_RESULTS,
    YOUTUBE_API_BASE_URL,
    YOUTUBE_MAX_RESULTS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config.yaml."""

    model_config = SettingsConfigDict(  # type: ignore[assignment]
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Allow extra env vars not defined in model
    )

    # YouTube Data API
    youtube_api_key: str = ""
    youtube_api_base_url: str = YOUTUBE_API_BASE_URL
    youtube_api_timeout: float = 30.0
    youtube_page_size: int = Field(default=YOUTUBE_MAX_RESULTS, ge=1, le=YOUTUBE_MAX_RESULTS)
    youtube_search_max_results: int = Field(
        default=DEFAULT_SEARCH_RESULTS, ge=1, le=YOUTUBE_MAX_RESULTS
    )

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Prometheus
    prometheus_enabled: bool = True
    prometheus_path: str = "/metrics"

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 3000
    cors_origins: list[str] = ["*"]
    static_dir: str | None = "public"

    @property
    def static_path(self) -> Path | None:
        """Get static directory as Path, or None when unset."""
        return Path(self.static_dir) if self.static_dir else None

    @property
    def has_api_key(self) -> bool:
        return bool(self.youtube_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_yaml_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to ./config.yaml or ./config.yml

    Returns:
        Dictionary with configuration values
    """
    if config_path is None:
        for path in (Path("config.yaml"), Path("config.yml")):
            if path.exists():
                config_path = path
                break

    if config_path is None or not Path(config_path).exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def apply_yaml_config(settings: Settings, config: dict[str, Any]) -> Settings:
    """
    Apply YAML configuration to settings object.

    Environment variables take precedence over YAML config, so a value is
    only taken from YAML while the setting still holds its default.

    Args:
        settings: Settings object to update
        config: Configuration dictionary from YAML

    Returns:
        Updated Settings object
    """
    defaults = Settings.model_fields

    def _apply(section: str, key: str, field: str, cast: Any = None) -> None:
        values = config.get(section) or {}
        if key not in values:
            return
        if getattr(settings, field) != defaults[field].default:
            return
        value = values[key]
        setattr(settings, field, cast(value) if cast else value)

    # YouTube API
    _apply("youtube_api", "api_key", "youtube_api_key", str)
    _apply("youtube_api", "base_url", "youtube_api_base_url", str)
    _apply("youtube_api", "timeout", "youtube_api_timeout", float)
    _apply("youtube_api", "page_size", "youtube_page_size", int)
    _apply("youtube_api", "search_max_results", "youtube_search_max_results", int)

    # Logging
    _apply("logging", "level", "log_level", str)
    _apply("logging", "file", "log_file", str)

    # Server
    _apply("server", "host", "server_host", str)
    _apply("server", "port", "server_port", int)
    _apply("server", "cors_origins", "cors_origins", list)
    _apply("server", "static_dir", "static_dir", str)

    # Prometheus
    _apply("prometheus", "enabled", "prometheus_enabled", bool)
    _apply("prometheus", "path", "prometheus_path", str)

    return settings


def get_settings_with_yaml(config_path: Path | str | None = None) -> Settings:
    """
    Get settings with YAML configuration applied.

    Priority: Environment Variables > YAML Config > Defaults

    Args:
        config_path: Optional path to config file

    Returns:
        Settings object with YAML configuration applied
    """
    settings = get_settings()
    config = load_yaml_config(config_path)
    return apply_yaml_config(settings, config)
