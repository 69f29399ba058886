"""Removal policy configuration.

A PolicyConfig carries the three pattern sources of the removal policy:

    remove    replaces the built-in removal list
    preserve  patterns taken out of the base list
    extra     patterns added to the final list

It is built once by the caller, from the environment or from a YAML file,
and passed down. Nothing in the pipeline reads the environment itself.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from mailheaderclean.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_REMOVE = "MAILHEADERCLEAN"
ENV_PRESERVE = "MAILHEADERCLEAN_PRESERVE"
ENV_EXTRA = "MAILHEADERCLEAN_EXTRA"

_CONFIG_KEYS = ("remove", "preserve", "extra")


def parse_pattern_list(source: str | None) -> tuple[str, ...] | None:
    """Parse a comma-separated pattern list.

    Each token is stripped of surrounding whitespace; tokens left empty
    are dropped. Internal whitespace is kept.

    Args:
        source: Comma-separated patterns, e.g. "X-Mailer, List-*".

    Returns:
        Tuple of patterns, or None if the source is missing, empty or
        whitespace-only. None means "absent": the caller falls back to
        its default. A non-empty source whose tokens are all empty, such
        as ",", is an explicit empty list.
    """
    if source is None or not source.strip():
        return None

    patterns = tuple(token.strip() for token in source.split(","))
    patterns = tuple(pattern for pattern in patterns if pattern)
    return patterns


@dataclass(frozen=True, slots=True)
class PolicyConfig:
    """Pattern sources for building a removal list.

    Attributes:
        remove: Replacement for the built-in removal list, or None.
        preserve: Patterns to take out of the base list, or None.
        extra: Patterns to add to the final list, or None.
    """

    remove: tuple[str, ...] | None = None
    preserve: tuple[str, ...] | None = None
    extra: tuple[str, ...] | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "PolicyConfig":
        """Build a config from environment-style variables.

        Args:
            environ: Mapping such as os.environ.

        Returns:
            PolicyConfig with the MAILHEADERCLEAN* variables parsed.
        """
        return cls(
            remove=parse_pattern_list(environ.get(ENV_REMOVE)),
            preserve=parse_pattern_list(environ.get(ENV_PRESERVE)),
            extra=parse_pattern_list(environ.get(ENV_EXTRA)),
        )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "PolicyConfig":
        """Load a config from a YAML policy file.

        The file holds a mapping with optional keys ``remove``, ``preserve``
        and ``extra``. Each value is a list of patterns or a comma-separated
        string:

            preserve: [Organization, User-Agent]
            extra: "X-Custom-*, X-Tracking-ID"

        Args:
            path: Path to the YAML file.

        Returns:
            PolicyConfig with the file's pattern lists.

        Raises:
            ConfigError: If the file cannot be read or is not a valid policy.
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(message=f"cannot read: {exc.strerror or exc}", path=path) from exc
        except yaml.YAMLError as exc:
            raise ConfigError(message=f"invalid YAML: {exc}", path=path) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(message="policy file must contain a mapping", path=path)

        unknown = sorted(str(key) for key in data if key not in _CONFIG_KEYS)
        if unknown:
            raise ConfigError(message=f"unknown keys: {', '.join(unknown)}", path=path)

        logger.info("Loaded removal policy config from %s", path)
        return cls(**{key: _parse_config_value(data.get(key), key, path) for key in _CONFIG_KEYS})

    def merged(self, other: "PolicyConfig") -> "PolicyConfig":
        """Return a config where fields set in ``other`` take precedence."""
        return PolicyConfig(
            remove=other.remove if other.remove is not None else self.remove,
            preserve=other.preserve if other.preserve is not None else self.preserve,
            extra=other.extra if other.extra is not None else self.extra,
        )


def _parse_config_value(value: object, key: str, path: Path | str) -> tuple[str, ...] | None:
    """Parse one pattern list from a policy file."""
    if value is None:
        return None
    if isinstance(value, str):
        return parse_pattern_list(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(item.strip() for item in value if item.strip())
    raise ConfigError(message=f"'{key}' must be a list of strings or a string", path=path)
