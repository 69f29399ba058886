"""Header extraction with continuation-line unfolding.

Reads the header section of a message (everything before the first
blank line) and emits it with folded fields re-joined onto one line.
No field is filtered in this mode.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from mailheaderclean.pipeline.classifier import (
    is_blank_line,
    is_continuation_line,
    split_field_name,
)
from mailheaderclean.pipeline.normalizer import normalize_line
from mailheaderclean.pipeline.source import PeekableLineSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HeaderField:
    """One logical header field.

    Attributes:
        name: Text before the first colon of the field-start line, or None
            if that line has no parseable name (or the field is made of
            continuation lines with no field-start line before them).
        lines: Raw physical lines, field-start line first.
    """

    name: str | None
    lines: tuple[str, ...]

    @property
    def unfolded(self) -> str:
        """The field as one normalized logical line."""
        parts = [normalize_line(line) for line in self.lines]
        text = "".join(part.removesuffix("\n") for part in parts)
        return text + "\n" if parts[-1].endswith("\n") else text


class HeaderFolder:
    """Extracts and unfolds the header section of a message.

    Folding is done by not terminating a field-start line when the next
    physical line is a continuation: the continuation line, which keeps
    its own leading whitespace, is then emitted straight after it.
    """

    def fold(self, lines: Iterable[str]) -> Iterator[str]:
        """Emit the header section with continuation lines unfolded.

        Args:
            lines: Raw message lines, each including its newline.

        Yields:
            Normalized header fragments. A fragment followed by a
            continuation line has its trailing newline removed.
        """
        source = PeekableLineSource(lines)
        emitted = 0

        while source.current is not None:
            line = source.current
            if is_blank_line(line):
                break

            fragment = normalize_line(line)
            following = source.peek()
            if following is not None and is_continuation_line(following):
                fragment = fragment.removesuffix("\n")

            yield fragment
            emitted += 1
            source.advance()

        logger.debug("Extracted %d header lines", emitted)

    def fields(self, lines: Iterable[str]) -> tuple[HeaderField, ...]:
        """Group the header section into logical fields.

        Args:
            lines: Raw message lines.

        Returns:
            Tuple of HeaderField in message order. Stops at the first
            blank line.
        """
        fields: list[HeaderField] = []
        name: str | None = None
        current: list[str] = []

        for line in lines:
            if is_blank_line(line):
                break

            if is_continuation_line(line) and current:
                current.append(line)
                continue

            if current:
                fields.append(HeaderField(name=name, lines=tuple(current)))

            name = None if is_continuation_line(line) else split_field_name(line)
            current = [line]

        if current:
            fields.append(HeaderField(name=name, lines=tuple(current)))

        return tuple(fields)
