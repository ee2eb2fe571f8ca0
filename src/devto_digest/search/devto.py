from __future__ import annotations

import logging
from typing import Any

import httpx

from devto_digest.data import Article, Query
from devto_digest.errors import FetchError

logger = logging.getLogger(__name__)

DEVTO_API_URL = "https://dev.to/api/articles"


class DevToFetcher:
    """Fetch articles from the dev.to public API.

    A query's tag is sent as ``tag`` and its freshness as ``top`` (articles
    most popular over the last N days). Only the first page is requested.

    Args:
        base_url: Articles endpoint (default: the public dev.to API).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str = DEVTO_API_URL,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout

    async def fetch(self, query: Query) -> list[Article]:
        """Fetch articles matching ``query``.

        Args:
            query: Resolved query; ``limit`` is not sent upstream.

        Returns:
            Decoded articles in API order.

        Raises:
            FetchError: On transport errors, error statuses, or a malformed body.
        """
        params = {"tag": query.tag, "top": query.freshness}
        request_url = str(httpx.URL(self._base_url, params=params))
        logger.debug("GET %s", request_url)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.get(self._base_url, params=params)
                response.raise_for_status()
            except httpx.HTTPError as e:
                logger.warning("Request to %s failed: %s", request_url, e)
                raise FetchError(request_url, str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(request_url, f"invalid JSON body: {e}") from e

        return decode_articles(data, url=request_url)


def decode_articles(data: Any, *, url: str = DEVTO_API_URL) -> list[Article]:
    """Decode a dev.to JSON array into Articles.

    Missing titles and urls decode to ``""``, a missing reaction count to 0.

    Raises:
        FetchError: If ``data`` is not a list of objects, or a field has the wrong type.
    """
    if not isinstance(data, list):
        raise FetchError(url, f"expected a JSON array, got {type(data).__name__}")

    articles: list[Article] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise FetchError(url, f"expected an article object, got {type(item).__name__}")
        articles.append(_decode_article(item, index=index, url=url))
    return articles


def _decode_article(item: dict[str, Any], *, index: int, url: str) -> Article:
    title = item.get("title") or ""
    link = item.get("url") or ""
    for name, value in (("title", title), ("url", link)):
        if not isinstance(value, str):
            raise FetchError(
                url, f"article {index}: expected string {name}, got {type(value).__name__}"
            )

    raw_score = item.get("positive_reactions_count") or 0
    try:
        score = int(raw_score)
    except (TypeError, ValueError) as e:
        raise FetchError(url, f"article {index}: invalid positive_reactions_count: {e}") from e

    return Article(title=title, url=link, score=score)
