from devto_digest.command.grammar import (
    DEFAULT_GRAMMAR,
    CommandGrammar,
    TagAlphabet,
    is_valid_command,
)
from devto_digest.command.parser import parse_command
from devto_digest.command.tokenizer import tokenize

__all__ = [
    "DEFAULT_GRAMMAR",
    "CommandGrammar",
    "TagAlphabet",
    "is_valid_command",
    "parse_command",
    "tokenize",
]
