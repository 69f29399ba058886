"""Pattern databases for header field removal."""

from mailheaderclean.patterns.bloat_headers import BUILTIN_REMOVAL_PATTERNS

__all__ = [
    "BUILTIN_REMOVAL_PATTERNS",
]
