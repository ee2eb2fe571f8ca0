"""Grammar for chat commands requesting articles.

A command is a command word followed by up to three parameters, each
separated by exactly one space::

    /article
    /article <tag>
    /article <tag> <freshness>
    /article <tag> <freshness> <limit>

``<tag>`` is drawn from the grammar's tag alphabet; ``<freshness>`` and
``<limit>`` are positive integers without a leading zero.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from enum import StrEnum

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "/article"
TOKEN_SEPARATOR = " "


class TokenKind(StrEnum):
    """Kinds of positional parameter a command shape may contain."""

    TAG = "tag"
    NUMBER = "number"


class TagAlphabet(StrEnum):
    """Character sets accepted for the tag parameter.

    ``STRICT`` admits only the 52 ASCII letters. ``LEGACY`` admits every
    character in the ASCII range ``A`` through ``z``, which adds the six
    punctuation characters sitting between ``Z`` and ``a``.
    """

    STRICT = "strict"
    LEGACY = "legacy"


_STRICT_TAG_CHARS = frozenset(string.ascii_letters)
_LEGACY_TAG_CHARS = frozenset(chr(c) for c in range(ord("A"), ord("z") + 1))

_TAG_CHARS: dict[TagAlphabet, frozenset[str]] = {
    TagAlphabet.STRICT: _STRICT_TAG_CHARS,
    TagAlphabet.LEGACY: _LEGACY_TAG_CHARS,
}

_NONZERO_DIGITS = frozenset("123456789")
_DIGITS = frozenset(string.digits)

# Accepted parameter sequences after the command word, shortest first.
COMMAND_SHAPES: tuple[tuple[TokenKind, ...], ...] = (
    (),
    (TokenKind.TAG,),
    (TokenKind.TAG, TokenKind.NUMBER),
    (TokenKind.TAG, TokenKind.NUMBER, TokenKind.NUMBER),
)

MAX_PARAMETERS = len(COMMAND_SHAPES[-1])


@dataclass(frozen=True)
class CommandGrammar:
    """Explicit description of the accepted command shapes.

    Args:
        command: Leading command word, including its slash.
        tag_alphabet: Which character set a tag may be drawn from.
        shapes: Accepted parameter sequences following the command word.
    """

    command: str = DEFAULT_COMMAND
    tag_alphabet: TagAlphabet = TagAlphabet.STRICT
    shapes: tuple[tuple[TokenKind, ...], ...] = field(default=COMMAND_SHAPES)

    def accepts(self, raw: str) -> bool:
        """Return True if ``raw`` matches one of the accepted shapes."""
        tokens = raw.split(TOKEN_SEPARATOR)
        if tokens[0] != self.command:
            return False

        params = tokens[1:]
        shape = self._shape_for(len(params))
        if shape is None:
            return False
        return all(self._matches(kind, token) for kind, token in zip(shape, params))

    def _shape_for(self, count: int) -> tuple[TokenKind, ...] | None:
        for shape in self.shapes:
            if len(shape) == count:
                return shape
        return None

    def _matches(self, kind: TokenKind, token: str) -> bool:
        if kind is TokenKind.TAG:
            return is_tag(token, self.tag_alphabet)
        return is_positive_number(token)


def is_tag(token: str, alphabet: TagAlphabet = TagAlphabet.STRICT) -> bool:
    """Return True if ``token`` is a non-empty run of tag characters."""
    allowed = _TAG_CHARS[alphabet]
    return bool(token) and all(ch in allowed for ch in token)


def is_positive_number(token: str) -> bool:
    """Return True if ``token`` matches ``[1-9][0-9]*`` using ASCII digits."""
    return bool(token) and token[0] in _NONZERO_DIGITS and all(ch in _DIGITS for ch in token)


DEFAULT_GRAMMAR = CommandGrammar()


def is_valid_command(raw: str, grammar: CommandGrammar | None = None) -> bool:
    """Check whether a raw command conforms to the grammar.

    Args:
        raw: Command string exactly as typed by the user.
        grammar: Grammar to check against (defaults to the strict ``/article`` grammar).

    Returns:
        True if the command may be tokenized and built into a query.
    """
    grammar = grammar or DEFAULT_GRAMMAR
    accepted = grammar.accepts(raw)
    if not accepted:
        logger.debug("Rejected command %r", raw)
    return accepted
