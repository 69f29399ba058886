"""Command line interface.

Three commands, each processing one message file to standard output:

    mailheader FILE              unfolded header section
    mailmessage FILE             message body
    mailheaderclean [-l] FILE    message with bloat headers removed

Exit status: 0 on success, 1 if FILE cannot be opened or read, 2 on
usage errors or an invalid policy file.
"""

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import BinaryIO

from mailheaderclean.config import ENV_EXTRA, ENV_PRESERVE, ENV_REMOVE, PolicyConfig
from mailheaderclean.exceptions import ConfigError, InputUnavailableError
from mailheaderclean.processor import MailProcessor

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_CLEAN_EPILOG = f"""\
environment variables:
  {ENV_REMOVE:<25} comma-separated list replacing the built-in removal list
  {ENV_PRESERVE:<25} comma-separated list excluded from removal
  {ENV_EXTRA:<25} comma-separated list of additional headers to remove

precedence: {ENV_REMOVE} (or built-in) - PRESERVE + EXTRA
environment variables override the matching keys of --config.

wildcard patterns (shell glob syntax, case-insensitive):
  X-*         any header starting with X-
  *-Status    any header ending with -Status
  X-MS-*      any header starting with X-MS-

Only the first Received header is kept.
"""


def _base_parser(prog: str, description: str, epilog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log processing details to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _run(
    prog: str,
    path: Path,
    operation: Callable[[Path, BinaryIO], None],
) -> int:
    """Run a strict file operation, reporting unreadable input."""
    output = sys.stdout.buffer
    try:
        operation(path, output)
    except InputUnavailableError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        output.flush()
    return EXIT_SUCCESS


def mailheader_main(argv: Sequence[str] | None = None) -> int:
    """Extract the header section of a message, unfolded."""
    parser = _base_parser(
        "mailheader",
        "Extract email headers from FILE (everything up to the first blank line).\n"
        "Continuation lines are joined with the previous line.",
    )
    parser.add_argument("file", type=Path, metavar="FILE", help="Email message file")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    processor = MailProcessor()
    return _run(parser.prog, args.file, processor.extract_headers_file_strict)


def mailmessage_main(argv: Sequence[str] | None = None) -> int:
    """Extract the body of a message."""
    parser = _base_parser(
        "mailmessage",
        "Extract the email message body from FILE (everything after the first blank line).",
    )
    parser.add_argument("file", type=Path, metavar="FILE", help="Email message file")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    processor = MailProcessor()
    return _run(parser.prog, args.file, processor.extract_body_file_strict)


def mailheaderclean_main(argv: Sequence[str] | None = None) -> int:
    """Filter non-essential headers from a message."""
    parser = _base_parser(
        "mailheaderclean",
        "Filter non-essential email headers from FILE.\n"
        "Output is the entire message with bloat headers removed. Essential\n"
        "routing headers and the message body are preserved.",
        epilog=_CLEAN_EPILOG,
    )
    parser.add_argument("file", type=Path, nargs="?", metavar="FILE", help="Email message file")
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List the active header removal list and exit",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="POLICY",
        help="YAML policy file with remove/preserve/extra pattern lists",
    )
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not args.list and args.file is None:
        parser.error("FILE is required unless --list is given")

    config = PolicyConfig()
    if args.config is not None:
        try:
            config = PolicyConfig.from_yaml(args.config)
        except ConfigError as exc:
            print(f"{parser.prog}: {exc}", file=sys.stderr)
            return EXIT_USAGE
    config = config.merged(PolicyConfig.from_environ(os.environ))

    processor = MailProcessor(config)
    if args.list:
        sys.stdout.write(processor.format_policy())
        sys.stdout.flush()
        return EXIT_SUCCESS

    return _run(parser.prog, args.file, processor.clean_headers_file_strict)
