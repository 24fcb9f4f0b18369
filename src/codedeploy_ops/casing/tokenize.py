"""Split raw parameter keys into words."""
from __future__ import annotations

import re
from enum import Enum

# Separators are consumed; the lookahead keeps the capital letter with the next word.
_WORD_BOUNDARY = re.compile(r"[-_]|(?=[A-Z])")


def key_text(key: object) -> str | None:
    """Return the text of a raw key, or None if the key cannot be rendered.

    Strings are used as-is. Enum members stand in for symbolic keys and
    contribute their string value.
    """
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return str(key)
    return None


def tokenize(key: str) -> list[str]:
    """Split a key into words at underscores, hyphens and capital letters.

    Tokens keep their source casing; re-casing happens when rendering.
    Digits never start a new word.

    Example:
        >>> tokenize("a_more_complex_atom123")
        ['a', 'more', 'complex', 'atom123']
        >>> tokenize("noChangeNeeded")
        ['no', 'Change', 'Needed']
    """
    return [token for token in _WORD_BOUNDARY.split(key) if token]


def canonical_key(key: str) -> str:
    """Lowercase snake_case form of a key, used for rule lookups.

    Example:
        >>> canonical_key("ec2TagFilters")
        'ec2_tag_filters'
    """
    return "_".join(token.lower() for token in tokenize(key))
