"""Pipeline components for message header and body processing."""

from mailheaderclean.pipeline.body import BodyExtractor
from mailheaderclean.pipeline.classifier import (
    ClassifiedLine,
    classify_line,
    is_blank_line,
    is_continuation_line,
    split_field_name,
)
from mailheaderclean.pipeline.filter import FilterState, HeaderFilterEngine, LineDecision
from mailheaderclean.pipeline.folder import HeaderField, HeaderFolder
from mailheaderclean.pipeline.matcher import PatternMatcher, matches, matches_any
from mailheaderclean.pipeline.normalizer import normalize_line
from mailheaderclean.pipeline.policy import (
    RemovalPolicyBuilder,
    build_removal_list,
    format_removal_list,
)
from mailheaderclean.pipeline.source import PeekableLineSource

__all__ = [
    "BodyExtractor",
    "ClassifiedLine",
    "FilterState",
    "HeaderField",
    "HeaderFilterEngine",
    "HeaderFolder",
    "LineDecision",
    "PatternMatcher",
    "PeekableLineSource",
    "RemovalPolicyBuilder",
    "build_removal_list",
    "classify_line",
    "format_removal_list",
    "is_blank_line",
    "is_continuation_line",
    "matches",
    "matches_any",
    "normalize_line",
    "split_field_name",
]
