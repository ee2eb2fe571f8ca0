"""Split a validated command into its positional parameters."""

from devto_digest.command.grammar import MAX_PARAMETERS, TOKEN_SEPARATOR
from devto_digest.data import CommandArgs


def tokenize(raw: str) -> CommandArgs:
    """Return (tag, freshness, limit) for an already-validated command.

    The command word is dropped and missing trailing parameters are padded
    with empty strings.
    """
    params = raw.split(TOKEN_SEPARATOR)[1 : MAX_PARAMETERS + 1]
    return CommandArgs(*params)
