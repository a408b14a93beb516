"""Per-invocation CLI state and the shared traceback switch.

Contents:
    * :class:`CLIContext` - What the root group hands to every subcommand.
    * :func:`store_cli_context` / :func:`get_cli_context` - Click ``ctx.obj`` access.
    * Traceback helpers mirroring ``--traceback`` into lib_cli_exit_tools.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from itms.adapters.config.loader import transporter_executable

if TYPE_CHECKING:
    from itms.composition import AppServices


class TracebackState(NamedTuple):
    """The two lib_cli_exit_tools flags ``--traceback`` controls."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State shared by the root group with its subcommands.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Application configuration (logging, transporter defaults).
        services: Wired port implementations.
        executable: Transporter started when a command sets no ``path``.
    """

    traceback: bool
    config: Config
    services: AppServices
    executable: str


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
) -> CLIContext:
    """Replace the services factory in ``ctx.obj`` with the invocation state."""
    cli_ctx = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        executable=transporter_executable(config),
    )
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root group.

    Raises:
        RuntimeError: The root group did not run first.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock(), executable="x")
        >>> get_cli_context(ctx).executable
        'x'
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Return the current traceback flags."""
    return TracebackState(
        enabled=bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        force_color=bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


@contextmanager
def preserved_traceback_state(restore: bool = True) -> Iterator[TracebackState]:
    """Yield the current traceback flags and put them back on exit.

    With ``restore=False`` whatever the block set is kept.
    """
    state = snapshot_traceback_state()
    try:
        yield state
    finally:
        if restore:
            restore_traceback_state(state)


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "preserved_traceback_state",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
