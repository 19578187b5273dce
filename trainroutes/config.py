"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the network capacity,
the adjacency storage backend, logging and the interactive shell.

Configuration can be overridden via environment variables:
- TRN_GRAPH_CAPACITY=50
- TRN_GRAPH_BACKEND=adjacency_list
- TRN_LOG_LEVEL=DEBUG
- TRN_SHELL_SEED_DEMO_NETWORK=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Route graph configuration.

    Environment variables prefixed with TRN_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TRN_GRAPH_")

    capacity: int = Field(default=20, ge=1, le=1000)
    backend: Literal["matrix", "adjacency_list"] = "matrix"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRN_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ShellConfig(BaseSettings):
    """Interactive shell configuration.

    Environment variables prefixed with TRN_SHELL_.
    """

    model_config = SettingsConfigDict(env_prefix="TRN_SHELL_")

    seed_demo_network: bool = True
    separator: str = "-" * 55


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.capacity)
        print(config.shell.seed_demo_network)

    Environment variables prefixed with TRN_.
    """

    model_config = SettingsConfigDict(env_prefix="TRN_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)


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
