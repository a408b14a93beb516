"""Helpers shared by the transporter and config commands.

Contents:
    * :func:`load_effective_options` - Read ``~/.itms`` and resolve one command.
    * :func:`report_errors` - Print transporter errors as a numbered list.
    * :func:`send_outcome_notification` - Notify and map email failures to exit codes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import rich_click as click

from itms.application.notifier import notify_outcome
from itms.domain.enums import Outcome
from itms.domain.errors import ConfigParseError, DeliveryError, EmailError
from itms.domain.options import EffectiveOptions, resolve

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def load_effective_options(cli_ctx: CLIContext, command: str) -> EffectiveOptions:
    """Return the resolved options for ``command``.

    Raises:
        SystemExit: The settings file is not valid YAML (exit code 78).
    """
    try:
        document = cli_ctx.services.load_settings()
    except ConfigParseError as exc:
        logger.error("Cannot parse settings", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return resolve(document, command)


def report_errors(errors: tuple[str, ...]) -> None:
    """Print the error count followed by each message, numbered from 1."""
    click.echo(f"{len(errors)} error(s)", err=True)
    click.echo("-" * 25, err=True)
    for index, message in enumerate(errors, start=1):
        click.echo(f"{index}. {message}", err=True)


def send_outcome_notification(
    cli_ctx: CLIContext,
    effective: EffectiveOptions,
    outcome: Outcome,
    params: Mapping[str, Any],
) -> None:
    """Send the notification for ``outcome`` if one is configured.

    After a successful run a notification problem decides the exit code.
    After a failed run it is only reported, so the caller's exit code wins.

    Raises:
        SystemExit: Only for :attr:`Outcome.SUCCESS`; 78 for an unusable
            email configuration, 69 when delivery fails.
    """
    fatal = outcome is Outcome.SUCCESS
    try:
        sent = notify_outcome(effective.email, outcome, params, send=cli_ctx.services.send_notification)
    except EmailError as exc:
        _notification_failed(exc, "Email configuration error", ExitCode.CONFIG_ERROR, fatal=fatal)
    except DeliveryError as exc:
        _notification_failed(exc, "Failed to send notification", ExitCode.SMTP_FAILURE, fatal=fatal)
    else:
        if sent:
            logger.info("Notification sent", extra={"outcome": outcome.value})


def _notification_failed(exc: Exception, user_message: str, exit_code: ExitCode, *, fatal: bool) -> None:
    logger.error(user_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"Error: {user_message} - {exc}", err=True)
    if fatal:
        raise SystemExit(exit_code) from exc


__all__ = [
    "load_effective_options",
    "report_errors",
    "send_outcome_notification",
]
