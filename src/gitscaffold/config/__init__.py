"""Configuration loading, schema, and defaults."""

from gitscaffold.config.loader import ConfigError, load_config
from gitscaffold.config.schema import GitScaffoldConfig

__all__ = [
    "ConfigError",
    "GitScaffoldConfig",
    "load_config",
]
