"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Iterable


class ConfigParseError(Exception):
    """The settings document exists but cannot be parsed.

    Raised by the settings store when ``~/.itms`` is not valid YAML or its
    top level is not a mapping. Caught at the CLI boundary and reported with
    the CONFIG_ERROR exit code.

    Example:
        >>> err = ConfigParseError("Error loading settings from /home/u/.itms: bad indent")
        >>> "bad indent" in str(err)
        True
    """


class UnknownCommandError(LookupError):
    """A command name that is not in the transporter registry.

    Example:
        >>> str(UnknownCommandError("frobnicate"))
        'frobnicate'
    """


class ExecutionError(Exception):
    """The delegated operation ran but reported one or more problems.

    Attributes:
        errors: Ordered messages reported by the transporter.

    Example:
        >>> err = ExecutionError(["ERROR ITMS-4000: bad package", "ERROR ITMS-3000: bad asset"])
        >>> len(err.errors)
        2
        >>> str(err)
        '2 error(s)'
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__(f"{len(self.errors)} error(s)")


class TransporterError(Exception):
    """Fatal, non-recoverable transporter or environment failure.

    Raised when the external tool is missing, cannot be started, or the
    invocation is unusable (e.g. a required option is absent).

    Example:
        >>> str(TransporterError("iTMSTransporter not found"))
        'iTMSTransporter not found'
    """


class EmailError(ValueError):
    """A notification is enabled but cannot be addressed.

    Example:
        >>> str(EmailError("no recipients"))
        'no recipients'
    """


class DeliveryError(Exception):
    """Notification delivery failed at SMTP level.

    Example:
        >>> str(DeliveryError("Connection refused by localhost:25"))
        'Connection refused by localhost:25'
    """


__all__ = [
    "ConfigParseError",
    "DeliveryError",
    "EmailError",
    "ExecutionError",
    "TransporterError",
    "UnknownCommandError",
]
