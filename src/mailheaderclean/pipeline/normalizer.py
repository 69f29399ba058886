"""Line normalization for email header and body text.

Handles:
- Carriage return removal (CRLF -> LF)
- Horizontal tab to single space conversion

The trailing line feed, if any, is left in place so that emitted lines
keep their terminators.
"""

# \r is deleted, \t becomes one space
_NORMALIZE_TABLE = str.maketrans({"\r": None, "\t": " "})


def normalize_line(line: str) -> str:
    """Normalize one raw line.

    Every carriage return is removed and every horizontal tab becomes a
    single space. All other characters pass through unchanged. Normalizing
    an already-normalized line returns it unchanged.

    Args:
        line: A raw line, normally including its trailing newline.

    Returns:
        The normalized line.
    """
    return line.translate(_NORMALIZE_TABLE)
