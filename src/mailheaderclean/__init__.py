"""mailheaderclean - Strip bloat headers from email messages."""

from mailheaderclean.config import PolicyConfig, parse_pattern_list
from mailheaderclean.exceptions import (
    ConfigError,
    InputUnavailableError,
    MailHeaderCleanError,
    PolicyBuildError,
)
from mailheaderclean.patterns import BUILTIN_REMOVAL_PATTERNS
from mailheaderclean.pipeline import (
    BodyExtractor,
    ClassifiedLine,
    FilterState,
    HeaderField,
    HeaderFilterEngine,
    HeaderFolder,
    LineDecision,
    PatternMatcher,
    PeekableLineSource,
    RemovalPolicyBuilder,
    build_removal_list,
    classify_line,
    format_removal_list,
    is_blank_line,
    is_continuation_line,
    matches,
    matches_any,
    normalize_line,
    split_field_name,
)
from mailheaderclean.processor import MailProcessor

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_REMOVAL_PATTERNS",
    "BodyExtractor",
    "ClassifiedLine",
    "ConfigError",
    "FilterState",
    "HeaderField",
    "HeaderFilterEngine",
    "HeaderFolder",
    "InputUnavailableError",
    "LineDecision",
    "MailHeaderCleanError",
    "MailProcessor",
    "PatternMatcher",
    "PeekableLineSource",
    "PolicyBuildError",
    "PolicyConfig",
    "RemovalPolicyBuilder",
    "build_removal_list",
    "classify_line",
    "format_removal_list",
    "is_blank_line",
    "is_continuation_line",
    "matches",
    "matches_any",
    "normalize_line",
    "parse_pattern_list",
    "split_field_name",
]
