"""The ``itms`` command group.

The group loads the application configuration, starts logging, and hands
a :class:`~.context.CLIContext` to the subcommand. Command names are
resolved by Click before the group runs, so an unknown name fails with a
usage error before anything is loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from itms import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from itms.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Run iTMSTransporter with defaults from ~/.itms.

    ``~/.itms`` itself is read by the subcommand.
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config()
    services.init_logging(config)
    apply_traceback_preferences(traceback)
    store_cli_context(ctx, traceback=traceback, config=config, services=services)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported here: the command modules import this package's siblings.
    from .commands import TRANSPORTER_COMMANDS, cli_config, cli_info

    for command in (cli_config, cli_info, *TRANSPORTER_COMMANDS):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
