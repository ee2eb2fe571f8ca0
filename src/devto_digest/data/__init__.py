"""Data models for devto-digest."""

from devto_digest.data.models import (
    DEFAULT_QUERY_DEFAULTS,
    Article,
    CommandArgs,
    Query,
    QueryDefaults,
    QueryDraft,
)

__all__ = [
    "DEFAULT_QUERY_DEFAULTS",
    "Article",
    "CommandArgs",
    "Query",
    "QueryDefaults",
    "QueryDraft",
]
