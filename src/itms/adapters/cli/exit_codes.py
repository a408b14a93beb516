"""Exit codes for CLI error paths.

Execution errors and transporter errors must stay distinguishable, so they
get their own codes; the rest follow sysexits.h and errno conventions.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI error paths.

    * 0: success
    * 1: the transporter reported errors (ExecutionError)
    * 2: the transporter could not run (TransporterError); also click usage errors
    * 22: EINVAL, an option value has the wrong type
    * 69: EX_UNAVAILABLE, notification delivery failed
    * 78: EX_CONFIG, malformed settings or unaddressable notification

    Example:
        >>> int(ExitCode.EXECUTION_ERROR)
        1
        >>> int(ExitCode.TRANSPORTER_ERROR)
        2
    """

    SUCCESS = 0
    EXECUTION_ERROR = 1
    TRANSPORTER_ERROR = 2
    INVALID_ARGUMENT = 22
    SMTP_FAILURE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
