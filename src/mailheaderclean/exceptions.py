"""Exceptions for mailheaderclean message processing."""

from dataclasses import dataclass
from pathlib import Path


class MailHeaderCleanError(Exception):
    """Base exception for all message processing errors."""

    pass


@dataclass
class InputUnavailableError(MailHeaderCleanError):
    """The input message could not be opened or read.

    Fatal for the message being processed. Nothing is retried.

    Attributes:
        message: Description of the error.
        path: The input that could not be read.
    """

    message: str
    path: Path | str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class PolicyBuildError(MailHeaderCleanError):
    """The removal list could not be built.

    Callers recover by using an empty removal list, so no header
    is removed rather than all output being blocked.
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigError(MailHeaderCleanError):
    """A policy configuration file is invalid.

    Attributes:
        message: Description of the error.
        path: The configuration file.
    """

    message: str
    path: Path | str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
