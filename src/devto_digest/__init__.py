"""devto-digest: turn chat commands into formatted dev.to article digests."""

from devto_digest.command import (
    DEFAULT_GRAMMAR,
    CommandGrammar,
    TagAlphabet,
    is_valid_command,
    parse_command,
    tokenize,
)
from devto_digest.config import DigestConfig, create_from_config, load_config
from devto_digest.data import (
    DEFAULT_QUERY_DEFAULTS,
    Article,
    CommandArgs,
    Query,
    QueryDefaults,
    QueryDraft,
)
from devto_digest.errors import DigestError, FetchError, GrammarError, ParseError
from devto_digest.output import format_article, format_articles
from devto_digest.pipeline import DigestPipeline
from devto_digest.query import build_query, with_freshness, with_limit, with_tag
from devto_digest.run_logger import RunLogger
from devto_digest.search import ArticleFetcher, DevToFetcher

__all__ = [
    # Models
    "Article",
    "CommandArgs",
    "DEFAULT_QUERY_DEFAULTS",
    "Query",
    "QueryDefaults",
    "QueryDraft",
    # Errors
    "DigestError",
    "FetchError",
    "GrammarError",
    "ParseError",
    # Command
    "CommandGrammar",
    "DEFAULT_GRAMMAR",
    "TagAlphabet",
    "is_valid_command",
    "parse_command",
    "tokenize",
    # Query building
    "build_query",
    "with_freshness",
    "with_limit",
    "with_tag",
    # Fetchers
    "ArticleFetcher",
    "DevToFetcher",
    # Output
    "format_article",
    "format_articles",
    # Pipeline
    "DigestPipeline",
    "RunLogger",
    # Config
    "DigestConfig",
    "create_from_config",
    "load_config",
]
