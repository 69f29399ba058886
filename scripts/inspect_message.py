#!/usr/bin/env python
"""Inspect how a message is filtered, showing the decision for every header line.

Uses the same MAILHEADERCLEAN* environment variables as the mailheaderclean
command.

Usage:
    python scripts/inspect_message.py message.eml                  # Header decisions
    python scripts/inspect_message.py message.eml --fields         # Unfolded fields
    python scripts/inspect_message.py message.eml --config p.yaml  # With a policy file
"""

import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mailheaderclean.config import PolicyConfig
from mailheaderclean.exceptions import ConfigError
from mailheaderclean.pipeline.filter import HeaderFilterEngine, LineDecision
from mailheaderclean.pipeline.folder import HeaderField, HeaderFolder
from mailheaderclean.pipeline.policy import build_removal_list
from mailheaderclean.processor import decode_lines


def load_lines(path: Path) -> list[str]:
    """Read a message as decoded lines."""
    with open(path, "rb") as f:
        return list(decode_lines(f))


def print_decision_table(decisions: list[LineDecision]) -> None:
    """Print one row per header line with its decision."""
    print(f"  {'Out':<4} {'Reason':<21} Text")
    print(f"  {'-'*4} {'-'*21} {'-'*55}")

    for decision in decisions:
        if decision.reason == "BODY":
            break
        text = decision.text.rstrip("\r\n")
        text_preview = text[:55] + "..." if len(text) > 55 else text
        marker = "yes" if decision.emitted else "-"
        print(f"  {marker:<4} {decision.reason:<21} {text_preview}")


def print_fields(fields: tuple[HeaderField, ...]) -> None:
    """Print the header section as unfolded fields."""
    for index, field in enumerate(fields):
        name = field.name if field.name is not None else "(unparseable)"
        print(f"{index:>3} {name} [{len(field.lines)} line(s)]")
        print(f"    {field.unfolded.rstrip()}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("message", type=Path, help="Email message file")
    parser.add_argument("--config", type=Path, help="YAML policy file")
    parser.add_argument("--fields", action="store_true", help="Show unfolded header fields")
    args = parser.parse_args()

    if not args.message.exists():
        print(f"Error: Message file not found: {args.message}")
        sys.exit(1)

    try:
        config = PolicyConfig.from_yaml(args.config) if args.config else PolicyConfig()
    except ConfigError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    config = config.merged(PolicyConfig.from_environ(os.environ))
    removal_list = build_removal_list(config)
    lines = load_lines(args.message)

    print(f"Message: {args.message}")
    print(f"Removal patterns: {len(removal_list)}")
    print("=" * 80)
    print()

    if args.fields:
        print_fields(HeaderFolder().fields(lines))
        return

    decisions = list(HeaderFilterEngine(removal_list).decisions(lines))
    print_decision_table(decisions)

    header_decisions = [d for d in decisions if d.reason not in ("BODY", "SEPARATOR")]
    kept = sum(1 for d in header_decisions if d.emitted)
    print()
    print(f"Header lines: {len(header_decisions)} ({kept} kept, {len(header_decisions) - kept} dropped)")


if __name__ == "__main__":
    main()
