"""Display the options a transporter command would run with.

Contents:
    * :func:`cli_config` - Show resolved options and email settings.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from itms.adapters.transporter import COMMANDS
from itms.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import load_effective_options

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("command", type=click.Choice(sorted(COMMANDS)))
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_config(ctx: click.Context, command: str, output_format: str) -> None:
    """Show the options COMMAND resolves from ~/.itms.

    Global defaults are merged with the command's own section and the
    success/failure email settings are shown as they would be used. The
    password is masked.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "format": fmt.value}):
        effective = load_effective_options(cli_ctx, command)
        logger.info("Displaying options", extra={"target": command, "format": fmt.value})
        cli_ctx.services.display_options(command, effective, output_format=fmt)


__all__ = ["cli_config"]
