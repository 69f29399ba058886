"""MailProcessor - Main public interface for message processing.

Provides three processing modes, each as a line-level and a file-level
operation:
- extract_headers(): Unfolded header section
- extract_body(): Normalized body
- clean_headers(): Whole message with bloat headers removed

File-level operations come in two flavours:
- *_file(): Returns False if the input cannot be read
- *_file_strict(): Raises InputUnavailableError
"""

import io
import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

from mailheaderclean.config import PolicyConfig
from mailheaderclean.exceptions import InputUnavailableError
from mailheaderclean.pipeline.body import BodyExtractor
from mailheaderclean.pipeline.filter import HeaderFilterEngine
from mailheaderclean.pipeline.folder import HeaderFolder
from mailheaderclean.pipeline.policy import build_removal_list, format_removal_list

logger = logging.getLogger(__name__)

# Arbitrary bytes survive a decode/encode round trip
ENCODING = "utf-8"
ERRORS = "surrogateescape"

Transform = Callable[[Iterable[str]], Iterator[str]]


def decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    """Decode raw byte lines for processing."""
    for raw in raw_lines:
        yield raw.decode(ENCODING, ERRORS)


def encode_line(line: str) -> bytes:
    """Encode a processed line for output."""
    return line.encode(ENCODING, ERRORS)


class MailProcessor:
    """Processes RFC 822 messages line by line.

    The removal list is built once, on first use, from the PolicyConfig
    and shared by every message this processor cleans.

    Example:
        processor = MailProcessor(PolicyConfig.from_environ(os.environ))

        # Line level
        cleaned = "".join(processor.clean_headers(lines))

        # File level, returns False if the file cannot be read
        ok = processor.clean_headers_file("message.eml", sys.stdout.buffer)
    """

    def __init__(self, config: PolicyConfig | None = None) -> None:
        """Initialize the processor.

        Args:
            config: Removal policy sources. None uses the built-in list.
        """
        self._config = config if config is not None else PolicyConfig()
        self._folder = HeaderFolder()
        self._body_extractor = BodyExtractor()
        self._engine: HeaderFilterEngine | None = None

    @property
    def config(self) -> PolicyConfig:
        return self._config

    @property
    def removal_list(self) -> tuple[str, ...]:
        """The active removal list (empty if it could not be built)."""
        return self._filter_engine.removal_list

    @property
    def _filter_engine(self) -> HeaderFilterEngine:
        if self._engine is None:
            self._engine = HeaderFilterEngine(build_removal_list(self._config))
        return self._engine

    def format_policy(self) -> str:
        """Active removal list, one pattern per line."""
        return format_removal_list(self.removal_list)

    def extract_headers(self, lines: Iterable[str]) -> Iterator[str]:
        """Header section with continuation lines unfolded."""
        return self._folder.fold(lines)

    def extract_body(self, lines: Iterable[str]) -> Iterator[str]:
        """Everything after the first blank line, normalized."""
        return self._body_extractor.extract(lines)

    def clean_headers(self, lines: Iterable[str]) -> Iterator[str]:
        """Whole message with removal-list fields and extra Received fields dropped."""
        return self._filter_engine.filter(lines)

    def extract_headers_file(self, path: Path | str, output: BinaryIO) -> bool:
        return self._run_safe(path, output, self.extract_headers)

    def extract_body_file(self, path: Path | str, output: BinaryIO) -> bool:
        return self._run_safe(path, output, self.extract_body)

    def clean_headers_file(self, path: Path | str, output: BinaryIO) -> bool:
        return self._run_safe(path, output, self.clean_headers)

    def extract_headers_file_strict(self, path: Path | str, output: BinaryIO) -> None:
        self._run(path, output, self.extract_headers)

    def extract_body_file_strict(self, path: Path | str, output: BinaryIO) -> None:
        self._run(path, output, self.extract_body)

    def clean_headers_file_strict(self, path: Path | str, output: BinaryIO) -> None:
        self._run(path, output, self.clean_headers)

    def _run_safe(self, path: Path | str, output: BinaryIO, transform: Transform) -> bool:
        """Process one named input, returning False if it cannot be read."""
        try:
            self._run(path, output, transform)
        except InputUnavailableError as exc:
            logger.error("Processing failed: %s", exc)
            return False
        return True

    def _run(self, path: Path | str, output: BinaryIO, transform: Transform) -> None:
        """Open one named input and write the transformed lines to output.

        Output is held back until the whole input has been read, so
        nothing is written if reading fails part way through.

        Raises:
            InputUnavailableError: If the input cannot be opened or read.
        """
        try:
            f = open(path, "rb")
        except OSError as exc:
            raise InputUnavailableError(message=f"cannot open: {exc.strerror or exc}", path=path) from exc

        buffer = io.BytesIO()
        written = 0
        with f:
            for line in transform(_read_lines(f, path)):
                buffer.write(encode_line(line))
                written += 1

        output.write(buffer.getvalue())
        logger.debug("Wrote %d lines from %s", written, path)


def _read_lines(f: BinaryIO, path: Path | str) -> Iterator[str]:
    """Decode lines from an open input, reporting read failures."""
    try:
        yield from decode_lines(f)
    except OSError as exc:
        raise InputUnavailableError(message=f"cannot read: {exc.strerror or exc}", path=path) from exc
