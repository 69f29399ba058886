"""Tests for body extraction."""

from mailheaderclean import BodyExtractor


def _extract(text: str) -> str:
    return "".join(BodyExtractor().extract(text.splitlines(keepends=True)))


class TestBodyExtractor:
    """Body extraction tests."""

    def test_body_after_blank_line(self) -> None:
        """Everything after the first blank line is emitted."""
        assert _extract("X: 1\n\n body line\n") == " body line\n"

    def test_no_blank_line(self) -> None:
        """A headers-only message has no body."""
        assert _extract("X: 1\nY: 2\n") == ""

    def test_further_blank_lines_kept(self) -> None:
        """Blank lines inside the body are kept."""
        assert _extract("X: 1\n\npara 1\n\npara 2\n") == "para 1\n\npara 2\n"

    def test_body_normalized(self) -> None:
        """Body lines lose carriage returns and tabs become spaces."""
        assert _extract("X: 1\r\n\r\n\tindented\r\n") == " indented\n"

    def test_folded_headers_skipped(self) -> None:
        """Continuation lines are part of the skipped header section."""
        assert _extract("Subject: a\n b\n\nBody\n") == "Body\n"

    def test_whitespace_separator(self) -> None:
        """A whitespace-only line also ends the headers."""
        assert _extract("X: 1\n   \nBody\n") == "Body\n"

    def test_empty_body(self) -> None:
        """Blank line at end of input gives an empty body."""
        assert _extract("X: 1\n\n") == ""
