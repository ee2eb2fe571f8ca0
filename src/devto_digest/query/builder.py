"""Build a Query from command parameters through composable steps.

Each step receives the mutable draft and either fills in a user override or
falls back to a default. ``build_query`` applies the steps in order and stops
at the first one that raises.
"""

from __future__ import annotations

from collections.abc import Callable

from devto_digest.data import DEFAULT_QUERY_DEFAULTS, Query, QueryDefaults, QueryDraft
from devto_digest.errors import ParseError

QueryStep = Callable[[QueryDraft], None]


def with_tag(tag: str, defaults: QueryDefaults = DEFAULT_QUERY_DEFAULTS) -> QueryStep:
    """Set the tag filter, or the default tag when ``tag`` is empty."""

    def step(draft: QueryDraft) -> None:
        draft.tag = tag if tag else defaults.tag

    return step


def with_freshness(
    freshness: str, defaults: QueryDefaults = DEFAULT_QUERY_DEFAULTS
) -> QueryStep:
    """Set the freshness token, or the default window when ``freshness`` is empty."""

    def step(draft: QueryDraft) -> None:
        draft.freshness = freshness if freshness else defaults.freshness

    return step


def with_limit(limit: str, defaults: QueryDefaults = DEFAULT_QUERY_DEFAULTS) -> QueryStep:
    """Set the result limit, parsing ``limit`` as a positive base-10 integer.

    Only ASCII digits are accepted; signs, underscores, whitespace and other
    Unicode digits are rejected even though ``int()`` would take them.

    Raises:
        ParseError: If ``limit`` is non-empty and not a positive integer.
    """

    def step(draft: QueryDraft) -> None:
        if not limit:
            draft.limit = defaults.limit
            return
        if not (limit.isascii() and limit.isdigit()):
            raise ParseError("limit", limit, "not a base-10 integer")
        value = int(limit, 10)
        if value <= 0:
            raise ParseError("limit", limit, "must be greater than 0")
        draft.limit = value

    return step


def build_query(*steps: QueryStep) -> Query:
    """Apply ``steps`` to a fresh draft and return the frozen result.

    Args:
        *steps: Configuration steps, applied left to right.

    Returns:
        The built Query.

    Raises:
        ParseError: Propagated from the first failing step; later steps are skipped.
    """
    draft = QueryDraft()
    for step in steps:
        step(draft)
    return draft.freeze()
