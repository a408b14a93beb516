"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config_cmd`
    * Transporter commands from :mod:`.transporter_cmd`
"""

from __future__ import annotations

from .config_cmd import cli_config
from .info import cli_info
from .transporter_cmd import TRANSPORTER_COMMANDS, run_command

__all__ = [
    "TRANSPORTER_COMMANDS",
    "cli_config",
    "cli_info",
    "run_command",
]
