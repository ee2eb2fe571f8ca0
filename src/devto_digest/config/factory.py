"""Factory functions to create components from configuration."""

from pathlib import Path

from devto_digest.command.grammar import CommandGrammar, TagAlphabet
from devto_digest.config.models import (
    DevToFetcherConfig,
    DigestConfig,
    FetcherConfig,
    GrammarConfig,
    QueryDefaultsConfig,
)
from devto_digest.data import QueryDefaults
from devto_digest.pipeline.digest import DigestPipeline
from devto_digest.run_logger import RunLogger
from devto_digest.search.base import ArticleFetcher
from devto_digest.search.devto import DevToFetcher


def create_grammar(config: GrammarConfig) -> CommandGrammar:
    """Create a command grammar from config."""
    return CommandGrammar(command=config.command, tag_alphabet=TagAlphabet(config.tag_alphabet))


def create_defaults(config: QueryDefaultsConfig) -> QueryDefaults:
    """Create query defaults from config."""
    return QueryDefaults(tag=config.tag, freshness=config.freshness, limit=config.limit)


def create_fetcher(config: FetcherConfig) -> ArticleFetcher:
    """Create an article fetcher from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, DevToFetcherConfig):
        return DevToFetcher(base_url=config.base_url, timeout=config.timeout_seconds)
    msg = f"Unknown fetcher config type: {type(config)}"
    raise ValueError(msg)


def create_pipeline(config: DigestConfig, run_logger: RunLogger | None = None) -> DigestPipeline:
    """Create a digest pipeline from config."""
    return DigestPipeline(
        create_fetcher(config.fetcher),
        grammar=create_grammar(config.grammar),
        defaults=create_defaults(config.defaults),
        run_logger=run_logger,
    )


def create_from_config(
    config: DigestConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[DigestPipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = create_pipeline(config, run_logger=run_logger)
    return (pipeline, run_logger)
