"""Type-safe domain enums for run outcomes and output formats."""

from __future__ import annotations

from enum import Enum


class Outcome(str, Enum):
    """Result of a delegated operation, selecting the notification branch.

    Inherits from str so values compare equal to the keys used in the
    settings document.

    Example:
        >>> Outcome.SUCCESS.value
        'success'
        >>> Outcome.FAILURE == "failure"
        True
    """

    SUCCESS = "success"
    FAILURE = "failure"


class OutputFormat(str, Enum):
    """Output format options for the ``config`` command.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Outcome",
    "OutputFormat",
]
