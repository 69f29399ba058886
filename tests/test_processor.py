"""Tests for the MailProcessor file-level interface."""

import io
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

from mailheaderclean import (
    InputUnavailableError,
    MailProcessor,
    PolicyBuildError,
    PolicyConfig,
    RemovalPolicyBuilder,
)
from mailheaderclean import processor as processor_module

MESSAGE = (
    b"Received: from mx1.example.com\r\n"
    b"\tby mx2.example.com\r\n"
    b"Received: from relay.example.net\r\n"
    b"From: Alice <alice@example.com>\r\n"
    b"X-MS-Exchange-Organization-SCL: -1\r\n"
    b"X-Mailer: Outlook\r\n"
    b"Subject: Quarterly\r\n"
    b" report\r\n"
    b"\r\n"
    b"Hello\tBob,\r\n"
    b"\r\n"
    b"See attached.\r\n"
)


@pytest.fixture
def message_path(tmp_path: Path) -> Path:
    path = tmp_path / "message.eml"
    path.write_bytes(MESSAGE)
    return path


class TestFileOperations:
    """Open-process-write entry points."""

    def test_extract_headers_file(self, message_path: Path) -> None:
        """Headers are unfolded and normalized."""
        output = io.BytesIO()

        assert MailProcessor().extract_headers_file(message_path, output) is True
        assert output.getvalue() == (
            b"Received: from mx1.example.com by mx2.example.com\n"
            b"Received: from relay.example.net\n"
            b"From: Alice <alice@example.com>\n"
            b"X-MS-Exchange-Organization-SCL: -1\n"
            b"X-Mailer: Outlook\n"
            b"Subject: Quarterly report\n"
        )

    def test_extract_body_file(self, message_path: Path) -> None:
        """The body is normalized."""
        output = io.BytesIO()

        assert MailProcessor().extract_body_file(message_path, output) is True
        assert output.getvalue() == b"Hello Bob,\n\nSee attached.\n"

    def test_clean_headers_file(self, message_path: Path) -> None:
        """Bloat headers and extra Received fields are removed; body untouched."""
        output = io.BytesIO()

        assert MailProcessor().clean_headers_file(message_path, output) is True
        assert output.getvalue() == (
            b"Received: from mx1.example.com\n"
            b" by mx2.example.com\n"
            b"From: Alice <alice@example.com>\n"
            b"Subject: Quarterly\n"
            b" report\n"
            b"\r\n"
            b"Hello\tBob,\r\n"
            b"\r\n"
            b"See attached.\r\n"
        )

    def test_clean_headers_with_preserve(self, message_path: Path) -> None:
        """Preserved headers survive."""
        output = io.BytesIO()
        processor = MailProcessor(PolicyConfig(preserve=("X-Mailer",)))

        processor.clean_headers_file(message_path, output)

        assert b"X-Mailer: Outlook\n" in output.getvalue()
        assert b"X-MS-Exchange" not in output.getvalue()

    def test_non_utf8_bytes_round_trip(self, tmp_path: Path) -> None:
        """Bytes that are not UTF-8 pass through unchanged."""
        path = tmp_path / "latin1.eml"
        path.write_bytes(b"Subject: caf\xe9\n\nna\xefve\n")
        output = io.BytesIO()

        MailProcessor().clean_headers_file(path, output)

        assert output.getvalue() == b"Subject: caf\xe9\n\nna\xefve\n"

    def test_lone_cr_does_not_split_lines(self, tmp_path: Path) -> None:
        """Only line feeds end lines."""
        path = tmp_path / "cr.eml"
        path.write_bytes(b"Subject: a\rb\n\nbody\n")
        output = io.BytesIO()

        MailProcessor().extract_headers_file(path, output)

        assert output.getvalue() == b"Subject: ab\n"


class TestInputUnavailable:
    """Unreadable input handling."""

    def test_missing_file_returns_false(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A missing file fails, emits nothing and logs an error."""
        output = io.BytesIO()

        with caplog.at_level(logging.ERROR, logger="mailheaderclean.processor"):
            result = MailProcessor().clean_headers_file(tmp_path / "missing.eml", output)

        assert result is False
        assert output.getvalue() == b""
        assert "cannot open" in caplog.text

    def test_strict_raises(self, tmp_path: Path) -> None:
        """Strict variants raise InputUnavailableError."""
        path = tmp_path / "missing.eml"

        with pytest.raises(InputUnavailableError) as exc_info:
            MailProcessor().extract_body_file_strict(path, io.BytesIO())

        assert exc_info.value.path == path
        assert "cannot open" in str(exc_info.value)

    def test_directory_is_unavailable(self, tmp_path: Path) -> None:
        """A directory cannot be processed as a message."""
        assert MailProcessor().extract_headers_file(tmp_path, io.BytesIO()) is False

    def test_read_error_writes_nothing(self, message_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A read failure part way through leaves the output untouched."""

        def _failing_decode(raw_lines: Iterable[bytes]) -> Iterator[str]:
            yield "From: Alice <alice@example.com>\n"
            raise OSError(5, "Input/output error")

        monkeypatch.setattr(processor_module, "decode_lines", _failing_decode)
        output = io.BytesIO()

        assert MailProcessor().extract_headers_file(message_path, output) is False
        assert output.getvalue() == b""

    def test_read_error_strict(self, message_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Strict variants report a read failure as cannot read."""

        def _failing_decode(raw_lines: Iterable[bytes]) -> Iterator[str]:
            yield "Subject: Quarterly\n"
            raise OSError(5, "Input/output error")

        monkeypatch.setattr(processor_module, "decode_lines", _failing_decode)
        output = io.BytesIO()

        with pytest.raises(InputUnavailableError, match="cannot read: Input/output error"):
            MailProcessor().clean_headers_file_strict(message_path, output)

        assert output.getvalue() == b""


class TestPolicy:
    """Removal list handling in the processor."""

    def test_default_removal_list(self) -> None:
        """Without configuration the built-in list is active."""
        assert MailProcessor().removal_list == RemovalPolicyBuilder().build()

    def test_comma_only_remove_disables_removal(self, message_path: Path) -> None:
        """MAILHEADERCLEAN="," keeps every field except extra Received fields."""
        processor = MailProcessor(PolicyConfig.from_environ({"MAILHEADERCLEAN": ","}))
        output = io.BytesIO()

        processor.clean_headers_file(message_path, output)

        assert processor.removal_list == ()
        assert b"X-MS-Exchange-Organization-SCL: -1\n" in output.getvalue()
        assert b"Received: from relay.example.net" not in output.getvalue()

    def test_format_policy(self) -> None:
        """format_policy lists one pattern per line."""
        processor = MailProcessor(PolicyConfig(remove=("A", "B"), extra=("C",)))

        assert processor.format_policy() == "A\nB\nC\n"

    def test_policy_failure_fails_open(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """If the policy cannot be built, no header is removed."""

        def _fail(self: RemovalPolicyBuilder) -> tuple[str, ...]:
            raise PolicyBuildError(message="out of memory")

        monkeypatch.setattr(RemovalPolicyBuilder, "build", _fail)
        processor = MailProcessor()
        lines = ["X-Mailer: m\n", "Received: a\n", "Received: b\n", "\n"]

        assert processor.removal_list == ()
        assert "".join(processor.clean_headers(lines)) == "X-Mailer: m\nReceived: a\n\n"

    def test_removal_list_built_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The policy is built on first use and then reused."""
        calls: list[int] = []
        original = RemovalPolicyBuilder.build

        def _counting(self: RemovalPolicyBuilder) -> tuple[str, ...]:
            calls.append(1)
            return original(self)

        monkeypatch.setattr(RemovalPolicyBuilder, "build", _counting)
        processor = MailProcessor()
        list(processor.clean_headers(["X: 1\n"]))
        list(processor.clean_headers(["X: 1\n"]))

        assert len(calls) == 1
