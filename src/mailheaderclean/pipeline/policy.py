"""Removal policy construction.

The final removal list is built from three sources in a fixed order:

    final = (base - preserve) + extra

where base is the configured ``remove`` list or the built-in list.
Both ``-`` and ``+`` compare pattern strings literally (case-insensitive):
a wildcard entry is never expanded. Preserving ``X-Organization`` does not
protect that field when the base list only holds ``X-*``.
"""

import logging
from collections.abc import Iterable

from mailheaderclean.config import PolicyConfig
from mailheaderclean.exceptions import PolicyBuildError
from mailheaderclean.patterns.bloat_headers import BUILTIN_REMOVAL_PATTERNS

logger = logging.getLogger(__name__)


def _fold(pattern: str) -> str:
    return pattern.lower()


class RemovalPolicyBuilder:
    """Builds the ordered removal list from a PolicyConfig.

    Result ordering: surviving base entries in their original order,
    followed by newly added extra entries in their given order.
    """

    def __init__(
        self,
        config: PolicyConfig | None = None,
        builtin: Iterable[str] = BUILTIN_REMOVAL_PATTERNS,
    ) -> None:
        """Initialize the builder.

        Args:
            config: Pattern sources. None is the same as an empty config.
            builtin: Base list used when config.remove is absent.
        """
        self._config = config if config is not None else PolicyConfig()
        self._builtin = tuple(builtin)

    def build(self) -> tuple[str, ...]:
        """Build the final removal list.

        Returns:
            Tuple of removal patterns.

        Raises:
            PolicyBuildError: If memory runs out while building the list.
        """
        try:
            return self._build()
        except MemoryError as exc:
            raise PolicyBuildError(message="out of memory while building removal list") from exc

    def _build(self) -> tuple[str, ...]:
        config = self._config

        if config.remove is not None:
            base = list(config.remove)
            source = "configured"
        else:
            base = list(self._builtin)
            source = "built-in"

        if config.preserve:
            preserved = {_fold(pattern) for pattern in config.preserve}
            base = [pattern for pattern in base if _fold(pattern) not in preserved]

        removal_list = base
        if config.extra:
            present = {_fold(pattern) for pattern in removal_list}
            for pattern in config.extra:
                if _fold(pattern) in present:
                    continue
                removal_list.append(pattern)
                present.add(_fold(pattern))

        logger.info(
            "Built removal list: %d patterns (%s base)",
            len(removal_list),
            source,
        )
        return tuple(removal_list)


def build_removal_list(config: PolicyConfig | None = None) -> tuple[str, ...]:
    """Build a removal list, falling back to an empty list on failure.

    Never blocks output because the policy could not be built: on
    PolicyBuildError a warning is logged and no header is removed.

    Args:
        config: Pattern sources.

    Returns:
        Tuple of removal patterns (empty on failure).
    """
    try:
        return RemovalPolicyBuilder(config).build()
    except PolicyBuildError as exc:
        logger.warning("%s; no headers will be removed", exc)
        return ()


def format_removal_list(removal_list: Iterable[str]) -> str:
    """Format a removal list one pattern per line."""
    return "".join(f"{pattern}\n" for pattern in removal_list)
