"""Pull-based line source with one line of lookahead."""

from collections.abc import Iterable, Iterator


class PeekableLineSource:
    """Wraps a line iterable, exposing the current line and the next one.

    Exactly one line of lookahead is held at any time. Lines are never
    retained beyond the current/next window.

    Example:
        source = PeekableLineSource(lines)
        while source.current is not None:
            if source.peek() is not None:
                ...
            source.advance()
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._current: str | None = next(self._lines, None)
        self._next: str | None = None
        self._peeked = False

    @property
    def current(self) -> str | None:
        """The current line, or None at end of input."""
        return self._current

    def peek(self) -> str | None:
        """Return the line after the current one without consuming it."""
        if not self._peeked:
            self._next = next(self._lines, None) if self._current is not None else None
            self._peeked = True
        return self._next

    def advance(self) -> str | None:
        """Move to the next line and return it (None at end of input)."""
        self._current = self.peek()
        self._next = None
        self._peeked = False
        return self._current
