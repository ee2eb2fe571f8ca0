"""Render fetched articles as a chat-ready digest."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice

from devto_digest.data import Article

BULLET = "\u2689"  # ⚉

ENTRY_TEMPLATE = "{bullet} [{title}]({url})\n`  Score: {score}`\n\n"


def format_article(article: Article) -> str:
    """Render a single digest entry, including its trailing blank line."""
    return ENTRY_TEMPLATE.format(
        bullet=BULLET,
        title=article.title,
        url=article.url,
        score=article.score,
    )


def format_articles(articles: Sequence[Article], limit: int) -> str:
    """Render at most ``limit`` articles in their original order.

    A non-positive ``limit`` renders nothing; a sequence shorter than
    ``limit`` is rendered in full.
    """
    if limit <= 0:
        return ""
    return "".join(format_article(a) for a in islice(articles, limit))
