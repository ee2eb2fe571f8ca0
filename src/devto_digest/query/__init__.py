from devto_digest.query.builder import (
    QueryStep,
    build_query,
    with_freshness,
    with_limit,
    with_tag,
)

__all__ = [
    "QueryStep",
    "build_query",
    "with_freshness",
    "with_limit",
    "with_tag",
]
