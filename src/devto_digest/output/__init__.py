from devto_digest.output.formatter import BULLET, format_article, format_articles

__all__ = [
    "BULLET",
    "format_article",
    "format_articles",
]
