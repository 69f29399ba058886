"""Glob matching of header field names against removal patterns.

Patterns use a reduced shell glob syntax:
    X-*         any name starting with X-
    *-Status    any name ending with -Status
    X-*-Status  X- followed by anything, ending in -Status

Only ``*`` is special. Matching is ASCII case-insensitive and anchored to
the whole field name: a pattern without ``*`` must equal the name.
"""

import string
from collections.abc import Iterable
from functools import lru_cache

_WILDCARD = "*"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@lru_cache(maxsize=1024)
def _segments(pattern: str) -> tuple[str, ...]:
    """Split a folded removal pattern into its literal segments."""
    return tuple(_fold(pattern).split(_WILDCARD))


def matches(pattern: str, name: str) -> bool:
    """Check if a header field name matches a removal pattern.

    Each literal segment is located once, left to right, so the cost is
    linear in the length of the name however many ``*`` the pattern has.

    Args:
        pattern: Removal pattern, possibly containing ``*``.
        name: Header field name (text before the colon).

    Returns:
        True if the whole name matches the pattern.
    """
    segments = _segments(pattern)
    name = _fold(name)
    if len(segments) == 1:
        return name == segments[0]

    first, *middle, last = segments
    if len(name) < len(first) + len(last):
        return False
    if not name.startswith(first) or not name.endswith(last):
        return False

    pos = len(first)
    end = len(name) - len(last)
    for segment in middle:
        index = name.find(segment, pos, end)
        if index == -1:
            return False
        pos = index + len(segment)
    return True


def matches_any(name: str, patterns: Iterable[str]) -> bool:
    """Check if a header field name matches any of the patterns."""
    return any(matches(pattern, name) for pattern in patterns)


class PatternMatcher:
    """Matches header field names against a fixed removal list.

    The removal list is never modified, so one matcher can be shared
    between messages.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self._patterns: tuple[str, ...] = tuple(patterns)

    @property
    def patterns(self) -> tuple[str, ...]:
        """The removal list, in order."""
        return self._patterns

    def should_remove(self, name: str) -> bool:
        """Check if a header field with this name should be removed."""
        return matches_any(name, self._patterns)
