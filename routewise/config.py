"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, comparison execution and logging.

Configuration can be overridden via environment variables:
- RW_NETWORK_DATA_DIR=/path/to/data
- RW_ROUTING_PARALLEL_COMPARISON=true
- RW_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with RW_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="RW_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    locations_file: str = "locations.csv"
    links_file: str = "links.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def links_path(self) -> Path:
        """Full path to links CSV file."""
        return self.data_dir / self.links_file


class RoutingConfig(BaseSettings):
    """Route comparison configuration.

    Environment variables prefixed with RW_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="RW_ROUTING_")

    parallel_comparison: bool = False
    max_workers: int = Field(default=3, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RW_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RW_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.links_path)
        print(config.routing.parallel_comparison)

    Environment variables prefixed with RW_.
    """

    model_config = SettingsConfigDict(env_prefix="RW_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
