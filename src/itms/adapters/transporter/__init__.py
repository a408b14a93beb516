"""Transporter adapter - runs iTMSTransporter for each registered command.

Contents:
    * :mod:`.commands` - Static command registry and argument builders
    * :mod:`.options` - Typed option validation (pydantic)
    * :mod:`.runner` - Subprocess execution and error-line parsing
"""

from __future__ import annotations

from .commands import COMMANDS, TransporterCommand, get_command, run_transporter
from .options import TransporterOptions
from .runner import ProcessOutput, parse_errors, run_process

__all__ = [
    "COMMANDS",
    "ProcessOutput",
    "TransporterCommand",
    "TransporterOptions",
    "get_command",
    "parse_errors",
    "run_process",
    "run_transporter",
]
