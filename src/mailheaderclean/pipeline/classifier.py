"""Line classification for RFC 822 message text.

All predicates operate on raw lines, before normalization.
"""

from dataclasses import dataclass

# C-locale whitespace, excluding the line feed that terminates a line
_BLANK_CHARS = " \t\r\v\f"

# Names this long (in bytes) or longer are not parsed
MAX_FIELD_NAME_BYTES = 255


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A raw line with its classification.

    Attributes:
        text: The raw line, including any trailing newline.
        is_blank: Line is empty or whitespace only (end-of-headers marker).
        is_continuation: Line starts with a space or tab (folded header).
    """

    text: str
    is_blank: bool
    is_continuation: bool


def is_blank_line(line: str) -> bool:
    """Check if a line marks the end of the header section.

    A line is blank if it is empty or if every character before the
    first newline is whitespace. A bare newline is blank.

    Args:
        line: A raw line.

    Returns:
        True if the line is blank.
    """
    content = line.split("\n", 1)[0]
    return content.strip(_BLANK_CHARS) == ""


def is_continuation_line(line: str) -> bool:
    """Check if a line continues the previous header field."""
    return line[:1] in (" ", "\t")


def classify_line(line: str) -> ClassifiedLine:
    """Classify a raw line.

    Blank takes precedence: a whitespace-only line is blank, never a
    continuation.
    """
    blank = is_blank_line(line)
    return ClassifiedLine(
        text=line,
        is_blank=blank,
        is_continuation=not blank and is_continuation_line(line),
    )


def split_field_name(line: str) -> str | None:
    """Extract the field name from a field-start line.

    The name is everything before the first colon, taken verbatim
    (no whitespace trimming).

    Args:
        line: A raw field-start line.

    Returns:
        The field name, or None if the line has no colon or the name
        is MAX_FIELD_NAME_BYTES bytes or longer.
    """
    colon = line.find(":")
    if colon == -1:
        return None

    name = line[:colon]
    if len(name.encode("utf-8", "surrogateescape")) >= MAX_FIELD_NAME_BYTES:
        return None

    return name
