"""Run the iTMSTransporter executable and interpret its output.

Contents:
    * :class:`ProcessOutput` - Captured result of one transporter process.
    * :func:`run_process` - Start the executable and wait for it.
    * :func:`parse_errors` - Extract error messages from transporter output.
    * :func:`normalize_returncode` - Convert signal codes to POSIX 128+N.
"""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from itms.domain.errors import TransporterError

logger = logging.getLogger(__name__)

# Transporter error lines look like:
#   ERROR ITMS-4000: "Invalid package" at Software/...
#   [2024-01-01 10:00:00 UTC] <main> ERROR ITMS-3000: ...
#   >> ERROR: Cannot connect
_ERROR_LINE = re.compile(
    r"^\s*(?:\[[^\]]*\]\s*)?(?:<[^>]*>\s*)?(?:>>\s*)?ERROR[:\s]\s*(?P<message>\S.*?)\s*$",
)


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Captured result of one transporter process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


def normalize_returncode(code: int) -> int:
    """Convert negative signal return codes to POSIX 128+N convention.

    Example:
        >>> normalize_returncode(-2)
        130
        >>> normalize_returncode(1)
        1
    """
    if code < 0:
        return 128 + abs(code)
    return code


def parse_errors(output: str) -> list[str]:
    """Return error messages found in transporter output, in order.

    Example:
        >>> parse_errors('ok\\nERROR ITMS-4000: "bad" at X\\n>> ERROR: no network\\n')
        ['ITMS-4000: "bad" at X', 'no network']
    """
    errors: list[str] = []
    for line in output.splitlines():
        match = _ERROR_LINE.match(line)
        if match:
            errors.append(match.group("message"))
    return errors


def run_process(argv: Sequence[str]) -> ProcessOutput:
    """Start the transporter and wait for it to finish.

    Args:
        argv: Executable followed by its arguments.

    Returns:
        Exit status and captured output streams.

    Raises:
        TransporterError: The executable is missing or cannot be started.
    """
    executable = argv[0]
    try:
        result = subprocess.run(  # noqa: S603
            list(argv),
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise TransporterError(f"{executable} not found; set `path` in ~/.itms or transporter.executable") from exc
    except OSError as exc:
        raise TransporterError(f"Cannot run {executable}: {exc}") from exc

    returncode = normalize_returncode(result.returncode)
    logger.debug("Transporter exited", extra={"executable": executable, "returncode": returncode})
    return ProcessOutput(returncode=returncode, stdout=result.stdout or "", stderr=result.stderr or "")


__all__ = [
    "ProcessOutput",
    "normalize_returncode",
    "parse_errors",
    "run_process",
]
