"""Message body extraction."""

import logging
from collections.abc import Iterable, Iterator

from mailheaderclean.pipeline.classifier import is_blank_line
from mailheaderclean.pipeline.normalizer import normalize_line

logger = logging.getLogger(__name__)


class BodyExtractor:
    """Emits everything after the first blank line.

    Header lines are skipped without folding. A message with no blank
    line is headers-only and yields nothing.
    """

    def extract(self, lines: Iterable[str]) -> Iterator[str]:
        """Extract the normalized message body.

        Args:
            lines: Raw message lines, each including its newline.

        Yields:
            Normalized body lines, blank lines included.
        """
        iterator = iter(lines)

        for line in iterator:
            if is_blank_line(line):
                break
        else:
            logger.debug("No header/body separator found, message has no body")
            return

        for line in iterator:
            yield normalize_line(line)
