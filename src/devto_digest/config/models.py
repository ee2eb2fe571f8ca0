"""Pydantic configuration models for devto-digest components."""

from typing import Literal

from pydantic import BaseModel, Field

from devto_digest.search.devto import DEVTO_API_URL

# ============================================================
# Command Configs
# ============================================================


class GrammarConfig(BaseModel):
    """Configuration for the command grammar.

    ``tag_alphabet="legacy"`` also accepts the six punctuation characters
    between ``Z`` and ``a`` in tags.
    """

    command: str = Field(default="/article", pattern=r"^/\S+$")
    tag_alphabet: Literal["strict", "legacy"] = "strict"

    model_config = {"frozen": True}


class QueryDefaultsConfig(BaseModel):
    """Values substituted for parameters a command omits."""

    tag: str = ""
    freshness: str = "10"
    limit: int = Field(default=10, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Fetcher Configs
# ============================================================


class DevToFetcherConfig(BaseModel):
    """Configuration for DevToFetcher."""

    type: Literal["devto"] = "devto"
    base_url: str = DEVTO_API_URL
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


FetcherConfig = DevToFetcherConfig


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-run JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class DigestConfig(BaseModel):
    """Root configuration for devto-digest."""

    grammar: GrammarConfig = Field(default_factory=GrammarConfig)
    defaults: QueryDefaultsConfig = Field(default_factory=QueryDefaultsConfig)
    fetcher: DevToFetcherConfig = Field(default_factory=DevToFetcherConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
