"""Configuration module for devto-digest."""

from devto_digest.config.factory import create_from_config
from devto_digest.config.loader import get_default_config_path, load_config
from devto_digest.config.models import (
    DevToFetcherConfig,
    DigestConfig,
    FetcherConfig,
    GrammarConfig,
    LoggingConfig,
    QueryDefaultsConfig,
)

__all__ = [
    "DevToFetcherConfig",
    "DigestConfig",
    "FetcherConfig",
    "GrammarConfig",
    "LoggingConfig",
    "QueryDefaultsConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
