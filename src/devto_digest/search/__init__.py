from devto_digest.search.base import ArticleFetcher
from devto_digest.search.devto import DEVTO_API_URL, DevToFetcher, decode_articles

__all__ = ["ArticleFetcher", "DEVTO_API_URL", "DevToFetcher", "decode_articles"]
