"""Turn a raw chat command into a Query."""

from __future__ import annotations

import logging

from devto_digest.command.grammar import CommandGrammar, is_valid_command
from devto_digest.command.tokenizer import tokenize
from devto_digest.data import DEFAULT_QUERY_DEFAULTS, Query, QueryDefaults
from devto_digest.errors import GrammarError
from devto_digest.query.builder import build_query, with_freshness, with_limit, with_tag

logger = logging.getLogger(__name__)


def parse_command(
    raw: str,
    *,
    grammar: CommandGrammar | None = None,
    defaults: QueryDefaults = DEFAULT_QUERY_DEFAULTS,
) -> Query:
    """Validate, tokenize and build a Query from ``raw``.

    Args:
        raw: Command string as typed, e.g. ``"/article python 7 3"``.
        grammar: Grammar the command must satisfy.
        defaults: Values used for parameters the command omits.

    Returns:
        The resolved Query.

    Raises:
        GrammarError: If ``raw`` does not match an accepted shape.
        ParseError: If the limit cannot be parsed as an integer.
    """
    if not is_valid_command(raw, grammar):
        logger.warning("Invalid command: %r", raw)
        raise GrammarError(raw)

    args = tokenize(raw)
    return build_query(
        with_tag(args.tag, defaults),
        with_freshness(args.freshness, defaults),
        with_limit(args.limit, defaults),
    )
