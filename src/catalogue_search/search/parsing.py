"""
Turn raw query text into an identifier batch.

Parsing is a pure tokenize-and-filter pipeline: nothing here raises for
bad input. Tokens that contain no leading integer are dropped, and the
caller decides what an empty batch means.

Integer parsing is permissive: a token is read up to its first non-digit
character, so ``"123abc"`` becomes ``123`` and ``"12.9"`` becomes ``12``.
"""

import re
from typing import Optional, Union

from catalogue_search.core import SearchMode

# Optional sign followed by ASCII digits. \d would also accept other
# Unicode decimal digits, which int() understands but users do not type.
_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")


def tokenize(raw: str, mode: Union[SearchMode, str]) -> list[str]:
    """
    Split raw input into candidate identifier tokens.

    SINGLE mode yields the trimmed input as one token. BULK mode yields
    one trimmed token per line, skipping blank lines.

    Args:
        raw: Text as typed by the user.
        mode: How to split the text.

    Returns:
        Non-empty tokens in input order.
    """
    mode = SearchMode.parse(mode)

    if mode is SearchMode.SINGLE:
        token = raw.strip()
        return [token] if token else []

    # strip() also removes the \r of Windows line endings
    return [line.strip() for line in raw.split("\n") if line.strip()]


def parse_identifier(token: str) -> Optional[int]:
    """
    Parse the leading base-10 integer of ``token``.

    Leading whitespace is skipped and an optional ``+`` or ``-`` sign is
    accepted. Parsing stops at the first non-digit character.

    Returns:
        The integer, or None when the token does not start with one or
        its digits exceed the interpreter's integer conversion limit.

    Example:
        >>> parse_identifier("123abc")
        123
        >>> parse_identifier("abc") is None
        True
    """
    match = _LEADING_INTEGER.match(token.lstrip())
    if match is None:
        return None
    try:
        return int(match.group())
    except ValueError:
        # Longer than sys.get_int_max_str_digits(); no dataset holds such an id
        return None


def parse_batch(raw: str, mode: Union[SearchMode, str]) -> list[int]:
    """
    Extract every valid identifier from raw input.

    Order and duplicates are preserved; tokens without a leading integer
    are dropped silently.
    """
    batch = []
    for token in tokenize(raw, mode):
        identifier = parse_identifier(token)
        if identifier is not None:
            batch.append(identifier)
    return batch
