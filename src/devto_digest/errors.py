"""Exceptions raised while turning a chat command into a digest."""

from __future__ import annotations


class DigestError(Exception):
    """Base class for all devto-digest errors."""


class GrammarError(DigestError):
    """Raised when a command matches none of the accepted shapes."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"invalid command: {command!r}")


class ParseError(DigestError, ValueError):
    """Raised when a numeric command parameter cannot be parsed."""

    def __init__(self, parameter: str, value: str, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"cannot parse {parameter} {value!r}: {reason}")


class FetchError(DigestError):
    """Raised when articles cannot be retrieved or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"error fetching {url}: {reason}")
