from __future__ import annotations

from typing import Protocol

from devto_digest.data import Article, Query


class ArticleFetcher(Protocol):
    """Interface for retrieving articles matching a query."""

    async def fetch(self, query: Query) -> list[Article]:
        """Fetch a single page of articles for the query's tag and freshness.

        Args:
            query: Resolved query. Only ``tag`` and ``freshness`` are sent upstream.

        Returns:
            Articles in the order returned by the API.
        """
        ...
