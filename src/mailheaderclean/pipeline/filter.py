"""In-place header filtering.

State machine over the lines of one message:

    InHeaders --(blank line)--> InBody

While in headers each field is kept or dropped as a whole: the decision
is made on the field-start line and applied to all its continuation
lines. Only the first Received field survives. Body lines pass through
unchanged.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Literal

from mailheaderclean.pipeline.classifier import (
    is_blank_line,
    is_continuation_line,
    split_field_name,
)
from mailheaderclean.pipeline.matcher import PatternMatcher
from mailheaderclean.pipeline.normalizer import normalize_line

logger = logging.getLogger(__name__)

RECEIVED = "received"

Reason = Literal[
    "SEPARATOR",
    "BODY",
    "CONTINUATION_KEPT",
    "CONTINUATION_DROPPED",
    "UNPARSEABLE",
    "FIRST_RECEIVED",
    "EXTRA_RECEIVED",
    "KEPT",
    "REMOVED",
]


@dataclass(slots=True)
class FilterState:
    """Mutable per-message filtering state.

    Attributes:
        in_headers: Still reading the header section.
        keep_current: Decision for the field being read, applied to its
            continuation lines.
        first_received_seen: A Received field has already been kept.
    """

    in_headers: bool = True
    keep_current: bool = True
    first_received_seen: bool = False


@dataclass(frozen=True, slots=True)
class LineDecision:
    """What the engine did with one input line.

    Attributes:
        text: The raw input line.
        output: The emitted text, or None if the line was dropped.
        field_name: Name of the field the line starts, if any.
        reason: Why the line was emitted or dropped.
    """

    text: str
    output: str | None
    field_name: str | None
    reason: Reason

    @property
    def emitted(self) -> bool:
        return self.output is not None


class HeaderFilterEngine:
    """Removes bloat header fields from a message.

    The engine only holds the removal list, which is never modified.
    Each call to filter() or decisions() uses its own FilterState, so
    one engine can process any number of messages.

    Example:
        engine = HeaderFilterEngine(build_removal_list(config))
        for line in engine.filter(lines):
            output.write(line)
    """

    def __init__(self, removal_list: Iterable[str]) -> None:
        """Initialize the engine.

        Args:
            removal_list: Removal patterns (see RemovalPolicyBuilder).
        """
        self._matcher = PatternMatcher(removal_list)

    @property
    def removal_list(self) -> tuple[str, ...]:
        return self._matcher.patterns

    def filter(self, lines: Iterable[str]) -> Iterator[str]:
        """Filter one message.

        Args:
            lines: Raw message lines, each including its newline.

        Yields:
            Output lines: kept header lines normalized, the separator and
            body lines unchanged.
        """
        for decision in self.decisions(lines):
            if decision.output is not None:
                yield decision.output

    def decisions(self, lines: Iterable[str]) -> Iterator[LineDecision]:
        """Run the state machine, yielding a decision for every input line."""
        state = FilterState()
        dropped = 0

        for line in lines:
            if state.in_headers:
                decision = self._decide_header_line(line, state)
                if decision.output is None:
                    dropped += 1
            else:
                decision = LineDecision(text=line, output=line, field_name=None, reason="BODY")
            yield decision

        logger.debug("Dropped %d header lines", dropped)

    def _decide_header_line(self, line: str, state: FilterState) -> LineDecision:
        if is_blank_line(line):
            state.in_headers = False
            return LineDecision(text=line, output=line, field_name=None, reason="SEPARATOR")

        if is_continuation_line(line):
            if state.keep_current:
                return LineDecision(
                    text=line,
                    output=normalize_line(line),
                    field_name=None,
                    reason="CONTINUATION_KEPT",
                )
            return LineDecision(text=line, output=None, field_name=None, reason="CONTINUATION_DROPPED")

        name = split_field_name(line)
        if name is None:
            # Fail open: emit what cannot be parsed
            state.keep_current = True
            return LineDecision(text=line, output=normalize_line(line), field_name=None, reason="UNPARSEABLE")

        if name.lower() == RECEIVED:
            if state.first_received_seen:
                state.keep_current = False
                return LineDecision(text=line, output=None, field_name=name, reason="EXTRA_RECEIVED")
            state.first_received_seen = True
            state.keep_current = True
            return LineDecision(
                text=line,
                output=normalize_line(line),
                field_name=name,
                reason="FIRST_RECEIVED",
            )

        state.keep_current = not self._matcher.should_remove(name)
        if state.keep_current:
            return LineDecision(text=line, output=normalize_line(line), field_name=name, reason="KEPT")
        return LineDecision(text=line, output=None, field_name=name, reason="REMOVED")
