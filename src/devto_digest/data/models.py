"""Core data models for devto-digest."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Query:
    """A resolved article request built from a chat command.

    ``freshness`` is forwarded to the API untouched; ``limit`` only bounds
    how many fetched articles are rendered.
    """

    tag: str
    freshness: str
    limit: int


@dataclass
class QueryDraft:
    """Mutable accumulator the query builder steps write into."""

    tag: str = ""
    freshness: str = ""
    limit: int = 0

    def freeze(self) -> Query:
        return Query(tag=self.tag, freshness=self.freshness, limit=self.limit)


@dataclass(frozen=True)
class QueryDefaults:
    """Values substituted for parameters missing from a command."""

    tag: str = ""
    freshness: str = "10"
    limit: int = 10

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValueError(f"default limit must be greater than 0, got {self.limit}")


DEFAULT_QUERY_DEFAULTS = QueryDefaults()


@dataclass(frozen=True)
class Article:
    """An article returned by the content API."""

    title: str
    url: str
    score: int = 0


class CommandArgs(NamedTuple):
    """Positional parameters of a command, padded with empty strings."""

    tag: str = ""
    freshness: str = ""
    limit: str = ""
