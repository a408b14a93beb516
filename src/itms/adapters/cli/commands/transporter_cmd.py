"""Transporter CLI commands built from the command registry.

Each registered transporter command becomes ``itms <name> [--key[=value]...]
[args...]``. Leading ``--key[=value]`` tokens override the options read from
``~/.itms``; everything from the first other token on is passed through.

Contents:
    * :func:`run_command` - Resolve, overlay, run, report, and notify.
    * :data:`TRANSPORTER_COMMANDS` - One click command per registry entry.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from itms.adapters.transporter import COMMANDS, TransporterCommand
from itms.application.notifier import build_params
from itms.domain.enums import Outcome
from itms.domain.errors import ExecutionError, TransporterError, UnknownCommandError
from itms.domain.overlay import overlay

from ..constants import PASSTHROUGH_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ._shared import load_effective_options, report_errors, send_outcome_notification

logger = logging.getLogger(__name__)


def run_command(cli_ctx: CLIContext, command: str, argv: Sequence[str]) -> None:
    """Run ``command`` with options from ``~/.itms`` overlaid by ``argv``.

    Raises:
        SystemExit: 1 when the transporter reported errors, 2 when it could
            not be run, 22 for an invalid option value, 69/78 when the
            success notification cannot be sent.
    """
    effective = load_effective_options(cli_ctx, command)
    options, remaining = overlay(effective, argv)
    final = MappingProxyType(dict(options))

    try:
        output = cli_ctx.services.run_transporter(command, final, remaining, executable=cli_ctx.executable)
    except (TransporterError, UnknownCommandError) as exc:
        logger.error("Transporter could not be run", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.TRANSPORTER_ERROR) from exc
    except ValidationError as exc:
        logger.error("Invalid option value", extra={"error": str(exc)})
        click.echo(f"Error: Invalid option value - {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
    except ExecutionError as exc:
        logger.error("Transporter reported errors", extra={"error_count": len(exc.errors)})
        report_errors(exc.errors)
        params = build_params(command, final, errors=exc.errors)
        send_outcome_notification(cli_ctx, effective, Outcome.FAILURE, params)
        raise SystemExit(ExitCode.EXECUTION_ERROR) from exc

    if output:
        click.echo(output)
    send_outcome_notification(cli_ctx, effective, Outcome.SUCCESS, build_params(command, final))


def _make_command(handler: TransporterCommand) -> click.Command:
    name = handler.name

    @click.command(name, context_settings=PASSTHROUGH_CONTEXT_SETTINGS, help=handler.summary)
    @click.argument("args", nargs=-1, type=click.UNPROCESSED)
    @click.pass_context
    def _command(ctx: click.Context, args: tuple[str, ...]) -> None:
        cli_ctx = get_cli_context(ctx)
        with lib_log_rich.runtime.bind(job_id=f"cli-{name}", extra={"command": name}):
            logger.info("Executing %s command", name)
            run_command(cli_ctx, name, args)

    return _command


TRANSPORTER_COMMANDS: tuple[click.Command, ...] = tuple(_make_command(handler) for handler in COMMANDS.values())


__all__ = ["TRANSPORTER_COMMANDS", "run_command"]
