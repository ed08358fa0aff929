"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- CR_GRAPH_DATA_DIR=/path/to/data
- CR_GRAPH_GRAPH_FILE=campus.dot
- CR_QUERY_CLOSEST_DESTINATIONS=5
- CR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Graph data and engine configuration.

    Environment variables prefixed with CR_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CR_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    graph_file: str = "campus.dot"
    initial_capacity: int = Field(default=64, ge=1)
    reject_negative_weights: bool = True

    @property
    def graph_path(self) -> Path:
        """Full path to the DOT graph file."""
        return self.data_dir / self.graph_file


class QueryConfig(BaseSettings):
    """Path query configuration.

    Environment variables prefixed with CR_QUERY_.
    """

    model_config = SettingsConfigDict(env_prefix="CR_QUERY_")

    closest_destinations: int = Field(default=10, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CR_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.graph_path)
        print(config.query.closest_destinations)

    Environment variables prefixed with CR_.
    """

    model_config = SettingsConfigDict(env_prefix="CR_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger."""
    config = config or get_config().observability
    level = config.level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="CR_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)
